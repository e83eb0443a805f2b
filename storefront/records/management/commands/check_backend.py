from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from records.client import get_client
from records.exceptions import RecordServiceError


class Command(BaseCommand):
    help = "Check that the record service is reachable and healthy"

    def handle(self, *args, **options):
        self.stdout.write(f"Record service: {settings.POCKETBASE_URL}")

        try:
            payload = get_client().health()
        except RecordServiceError as exc:
            raise CommandError(f"Record service check failed: {exc.message}") from exc

        self.stdout.write(
            self.style.SUCCESS(f"✅ {payload.get('message') or 'Record service is healthy.'}")
        )
