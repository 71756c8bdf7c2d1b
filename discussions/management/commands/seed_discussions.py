"""
Management command to seed a demo user and a couple of sample trees:
- demo user (password configurable)
- 10 -> add 5 -> multiply 3, and 10 -> divide 4
- 7 -> subtract 2
"""
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from discussions.models import Node, Operation
from discussions.services import DiscussionService
from discussions.store import NodeStore

User = get_user_model()


class Command(BaseCommand):
    help = "Seed a demo user with sample number trees"

    def add_arguments(self, parser):
        parser.add_argument("--username", default="demo")
        parser.add_argument("--password", default="demo1234")

    def handle(self, *args, **options):
        self.stdout.write("Seeding discussion data...")

        user, created = User.objects.get_or_create(username=options["username"])
        if created:
            user.set_password(options["password"])
            user.save()
            self.stdout.write(self.style.SUCCESS(f"✓ Created user {user.username}"))
        else:
            self.stdout.write(f"User {user.username} already exists")

        if Node.objects.filter(author=user).exists():
            self.stdout.write(self.style.WARNING(f"{user.username} already has nodes, skipping sample trees"))
            return

        service = DiscussionService(NodeStore())

        ten = service.create_root(user.id, Decimal("10"))
        fifteen = service.create_child(user.id, ten.id, Operation.ADD, Decimal("5"))
        service.create_child(user.id, fifteen.id, Operation.MULTIPLY, Decimal("3"))
        service.create_child(user.id, ten.id, Operation.DIVIDE, Decimal("4"))
        self.stdout.write(self.style.SUCCESS("✓ Created tree starting at 10"))

        seven = service.create_root(user.id, Decimal("7"))
        service.create_child(user.id, seven.id, Operation.SUBTRACT, Decimal("2"))
        self.stdout.write(self.style.SUCCESS("✓ Created tree starting at 7"))

        self.stdout.write(self.style.SUCCESS("Seeding complete"))
