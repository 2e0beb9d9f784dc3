# apps/tokens/management/commands/decode_token.py
import json
import logging

from django.core.management.base import BaseCommand

from apps.tokens.diagnostics import SAMPLE_TOKEN, TokenDecodeError, decode_payload

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Print the claims of a JWT without verifying it (defaults to the built-in sample token)."

    def add_arguments(self, parser):
        parser.add_argument("--token", default=SAMPLE_TOKEN, help="Token to decode")

    def handle(self, *args, **opts):
        try:
            claims = decode_payload(opts["token"])
        except TokenDecodeError as exc:
            # Reported, not raised: this is a diagnostic, exit status stays 0.
            logger.warning("could not decode token: %s", exc)
            self.stderr.write(self.style.ERROR(f"Error decoding token: {exc}"))
            return

        self.stdout.write("Token payload:")
        self.stdout.write(json.dumps(claims, indent=2))
