from django.core.management.base import BaseCommand
from django.utils import timezone

from portal import querycache
from portal.services.appointments import list_appointments
from portal.services.contacts import list_contacts
from portal.services.doctors import featured_doctors, list_doctors


class Command(BaseCommand):
    help = "Warm the query cache for entities with a freshness window."

    def handle(self, *args, **options):
        now = timezone.now()
        warmed = []

        doctors = list_doctors()
        featured_doctors(3)
        warmed.append('doctors')
        # Per-specialty lists used by the service pages
        for specialty in {d.specialty for d in doctors}:
            list_doctors(specialty=specialty)

        list_appointments()
        warmed.append('appointments')

        list_contacts()
        warmed.append('hospital-contacts')

        windows = ", ".join(f"{e}={querycache.freshness(e)}s" for e in warmed)
        self.stdout.write(self.style.SUCCESS(f"Warmed {len(warmed)} entities at {now} ({windows})"))
