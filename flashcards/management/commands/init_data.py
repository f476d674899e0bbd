import json
import os
from django.core.management.base import BaseCommand, CommandError

from scheduler.data.repos import reset_deck
from scheduler.domain import Card, ContractViolation


class Command(BaseCommand):
    help = "Replace the deck with the cards from a JSON file, all in bucket 0 at day 0."

    def add_arguments(self, parser):
        parser.add_argument(
            "--file", default="cards.json", help="JSON file name to load cards from"
        )

    def handle(self, *args, **options):
        file_name = options.get("file") or "cards.json"
        json_file_path = file_name
        if not os.path.isabs(file_name):
            json_file_path = os.path.join(os.path.dirname(__file__), file_name)

        try:
            with open(json_file_path, encoding="utf-8") as json_file:
                data = json.load(json_file)
        except (OSError, json.JSONDecodeError) as e:
            raise CommandError(f"Error loading data: {e}") from e

        if not isinstance(data, list):
            raise CommandError(f"{file_name} must contain a list of cards")

        try:
            cards = [
                Card(
                    item["front"],
                    item["back"],
                    hint=item.get("hint"),
                    tags=item.get("tags") or (),
                )
                for item in data
            ]
        except (KeyError, TypeError, ContractViolation) as e:
            raise CommandError(f"Invalid card in {file_name}: {e}") from e

        # duplicates collapse onto the first occurrence
        cards = list(dict.fromkeys(cards))
        reset_deck(cards)

        self.stdout.write(
            self.style.SUCCESS(f"Loaded {len(cards)} cards from {file_name}")
        )
