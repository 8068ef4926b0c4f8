"""
Apply migrations in the order the social login tables require.

allauth's socialaccount tables reference django.contrib.sites, so the sites
app is migrated on its own first. Running plain `migrate` on a database where
socialaccount was applied before sites fails with InconsistentMigrationHistory.

Usage:
    python manage.py migrate_social
    python manage.py migrate_social --database other --noinput
"""
from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import DEFAULT_DB_ALIAS


class Command(BaseCommand):
    help = "Run `migrate sites` followed by `migrate`"

    def add_arguments(self, parser):
        parser.add_argument(
            "--database",
            default=DEFAULT_DB_ALIAS,
            help='Nominates a database to synchronize. Defaults to the "default" database.',
        )
        parser.add_argument(
            "--noinput",
            "--no-input",
            action="store_false",
            dest="interactive",
            help="Tells Django to NOT prompt the user for input of any kind.",
        )

    def handle(self, *args, **options):
        common = {
            "database": options["database"],
            "interactive": options["interactive"],
            "verbosity": options["verbosity"],
            "stdout": self.stdout,
            "stderr": self.stderr,
        }
        self.stdout.write("Migrating sites...")
        call_command("migrate", "sites", **common)
        self.stdout.write("Migrating all apps...")
        call_command("migrate", **common)
        self.stdout.write(self.style.SUCCESS("Migrations applied."))
