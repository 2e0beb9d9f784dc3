# apps/tokens/management/commands/verify_token.py
import json

from django.core.management.base import BaseCommand

from apps.tokens.diagnostics import CANDIDATE_SECRETS, PRIMARY_SECRET, SAMPLE_TOKEN, scan_secrets


class Command(BaseCommand):
    help = "Find which known secret signed a JWT (primary secret first, then the candidate list)."

    def add_arguments(self, parser):
        parser.add_argument("--token", default=SAMPLE_TOKEN, help="Token to verify")

    def handle(self, *args, **opts):
        attempts = scan_secrets(opts["token"], PRIMARY_SECRET, CANDIDATE_SECRETS)

        primary, rest = attempts[0], attempts[1:]
        if primary.valid:
            self._report_valid(primary, label="Token is valid")
            return

        self.stdout.write(self.style.ERROR(f"Token is invalid: {primary.error}"))
        self.stdout.write("\nTrying other possible secrets...")
        for attempt in rest:
            if attempt.valid:
                self._report_valid(attempt, label=f'Token is valid with secret: "{attempt.secret}"')
                return
            self.stdout.write(self.style.ERROR(f'Does not work with: "{attempt.secret}"'))

        self.stdout.write(self.style.WARNING(f"No matching secret among {len(attempts)} tried."))

    def _report_valid(self, attempt, label):
        self.stdout.write(self.style.SUCCESS(label))
        if attempt.expired:
            self.stdout.write(self.style.WARNING("(token has expired)"))
        self.stdout.write("Decoded data:")
        self.stdout.write(json.dumps(attempt.claims, indent=2))
