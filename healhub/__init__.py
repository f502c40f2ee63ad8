"""Django project package for the HealHub hospital services site."""
