from django.core.management.base import BaseCommand

from pos.domain.exceptions import DuplicatePosNameError
from pos.domain.model import CampusType, Pos, PosType
from pos.services import get_pos_service

SEED_POS = [
    Pos(
        name="Schmelzpunkt",
        description="Great waffles",
        type=PosType.CAFE,
        campus=CampusType.ALTSTADT,
        street="Hauptstraße",
        house_number="90",
        postal_code="69117",
        city="Heidelberg",
    ),
    Pos(
        name="Bäcker Görtz",
        description="Walking distance to lecture hall",
        type=PosType.BAKERY,
        campus=CampusType.INF,
        street="Berliner Str.",
        house_number="43",
        postal_code="69120",
        city="Heidelberg",
    ),
    Pos(
        name="Café Botanik",
        description="Outdoor seating available",
        type=PosType.CAFETERIA,
        campus=CampusType.INF,
        street="Im Neuenheimer Feld",
        house_number="304",
        postal_code="69120",
        city="Heidelberg",
    ),
    Pos(
        name="New Vending Machine",
        description="Use only in case of emergencies",
        type=PosType.VENDING_MACHINE,
        campus=CampusType.BERGHEIM,
        street="Teststraße",
        house_number="99a",
        postal_code="12345",
        city="Other City",
    ),
]


class Command(BaseCommand):
    help = "Seed demo points of sale (idempotent; existing names are skipped)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete all points of sale before seeding.",
        )

    def handle(self, *args, **options):
        service = get_pos_service()

        if options["clear"]:
            service.clear()
            self.stdout.write(self.style.WARNING("Cleared existing points of sale."))

        created = 0
        for pos in SEED_POS:
            try:
                service.upsert(pos)
            except DuplicatePosNameError:
                self.stdout.write(f"Skipping existing POS: {pos.name}")
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(f"✅ Seeded {created} point(s) of sale.")
        )
