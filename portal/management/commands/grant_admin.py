from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from portal.services.audit import log_action
from portal.services.roles import set_admin

User = get_user_model()


class Command(BaseCommand):
    help = "Set (or with --revoke clear) the admin role flag for the user with the given e-mail."

    def add_arguments(self, parser):
        parser.add_argument('email')
        parser.add_argument('--revoke', action='store_true', help='Remove the admin flag instead')

    def handle(self, *args, **opts):
        email = opts['email'].strip().lower()
        user = User.objects.filter(username=email).first()
        if user is None:
            raise CommandError(f'No user registered with {email}')
        flag = not opts['revoke']
        set_admin(user, flag)
        log_action(user=None, action='grant_admin' if flag else 'revoke_admin', object_type='user',
                   object_id=user.pk, detail={'email': email})
        self.stdout.write(self.style.SUCCESS(f"{email}: is_admin={flag}"))
