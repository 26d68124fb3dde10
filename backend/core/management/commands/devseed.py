from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from accounts.models import User
from food.models import FoodItem
from rides.models import Ride


SEED_PASSWORD = "Splashtown123!"
ADMIN_EMAIL = "admin@splashtown.test"
ADMIN_PASSWORD = "AdminSplashtown123!"

RIDES = [
    {
        "name": "Tsunami Twister",
        "description": "Spiral through a massive water funnel with a heart-pounding 360-degree loop.",
        "image": "https://images.pexels.com/photos/7541299/pexels-photo-7541299.jpeg",
        "price": Decimal("29.99"),
        "thrill_level": Ride.EXTREME,
        "min_height": 140,
        "duration": 3,
        "capacity": 4,
    },
    {
        "name": "River Rapids",
        "description": "Rushing waters and unexpected drops on a river adventure for the whole family.",
        "image": "https://images.pexels.com/photos/7456112/pexels-photo-7456112.jpeg",
        "price": Decimal("24.99"),
        "thrill_level": Ride.MODERATE,
        "min_height": 120,
        "duration": 8,
        "capacity": 6,
    },
    {
        "name": "Wave Pool Paradise",
        "description": "A massive wave pool cycling from gentle ripples to powerful surf through the day.",
        "image": "https://images.pexels.com/photos/6858673/pexels-photo-6858673.jpeg",
        "price": Decimal("19.99"),
        "thrill_level": Ride.MILD,
        "min_height": 0,
        "duration": 1,
        "capacity": 200,
    },
    {
        "name": "Aqua Loop",
        "description": "Drop through a trap door into a vertical loop on our most intense slide.",
        "image": "https://images.pexels.com/photos/7541301/pexels-photo-7541301.jpeg",
        "price": Decimal("34.99"),
        "thrill_level": Ride.EXTREME,
        "min_height": 150,
        "duration": 2,
        "capacity": 1,
    },
    {
        "name": "Lazy River",
        "description": "Float past scenic landscapes and gentle waterfalls.",
        "image": "https://images.pexels.com/photos/7456116/pexels-photo-7456116.jpeg",
        "price": Decimal("14.99"),
        "thrill_level": Ride.MILD,
        "min_height": 0,
        "duration": 30,
        "capacity": 100,
    },
]

FOOD = [
    ("Classic Burger", "Beef patty with lettuce, tomato, cheese and our special sauce",
     "https://images.pexels.com/photos/1639557/pexels-photo-1639557.jpeg", "12.99", FoodItem.MAIN_COURSE, False, 15),
    ("Veggie Pizza", "Fresh vegetables, mushrooms and melted cheese on a house-made crust",
     "https://images.pexels.com/photos/825661/pexels-photo-825661.jpeg", "14.99", FoodItem.MAIN_COURSE, True, 20),
    ("French Fries", "Crispy golden fries with our spice blend",
     "https://images.pexels.com/photos/1583884/pexels-photo-1583884.jpeg", "4.99", FoodItem.SNACKS, True, 8),
    ("Ice Cream Sundae", "Three scoops with chocolate sauce, whipped cream and a cherry",
     "https://images.pexels.com/photos/3625372/pexels-photo-3625372.jpeg", "7.99", FoodItem.DESSERTS, True, 5),
    ("Fresh Lemonade", "Fresh lemons with a hint of mint",
     "https://images.pexels.com/photos/2109099/pexels-photo-2109099.jpeg", "3.99", FoodItem.BEVERAGES, True, 3),
    ("Chicken Tenders", "Crispy breaded chicken tenders with a dipping sauce",
     "https://images.pexels.com/photos/60616/fried-chicken-chicken-fried-crunchy-60616.jpeg", "9.99",
     FoodItem.MAIN_COURSE, False, 12),
    ("Nachos Grande", "Tortilla chips loaded with cheese, jalapeños and all the toppings",
     "https://images.pexels.com/photos/1108775/pexels-photo-1108775.jpeg", "11.99", FoodItem.SNACKS, False, 10),
    ("Chocolate Brownie", "Warm chocolate brownie with vanilla ice cream",
     "https://images.pexels.com/photos/45202/brownie-dessert-cake-sweet-45202.jpeg", "6.99",
     FoodItem.DESSERTS, True, 5),
]


class Command(BaseCommand):
    help = "Populate the local development database with the ride and food catalogue."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete catalogue items that have never been purchased before seeding.",
        )

    def handle(self, *args, **options):
        if not settings.DEBUG:
            raise CommandError("Refusing to seed data while DEBUG is False.")

        with transaction.atomic():
            if options["reset"]:
                self.stdout.write(self.style.MIGRATE_HEADING("Clearing unused catalogue items"))
                Ride.objects.filter(booking_lines__isnull=True).delete()
                FoodItem.objects.filter(order_lines__isnull=True).delete()

            self.stdout.write(self.style.MIGRATE_HEADING("Creating rides"))
            for ride_data in RIDES:
                self._ensure_ride(ride_data)

            self.stdout.write(self.style.MIGRATE_HEADING("Creating food menu"))
            for name, description, image, price, category, is_vegetarian, prep in FOOD:
                self._ensure_food(
                    name=name,
                    description=description,
                    image=image,
                    price=Decimal(price),
                    category=category,
                    is_vegetarian=is_vegetarian,
                    preparation_time=prep,
                )

            self.stdout.write(self.style.MIGRATE_HEADING("Creating users"))
            self._ensure_user(
                email="visitor@splashtown.test",
                first_name="Vera",
                last_name="Visitor",
                role=User.ROLE_USER,
                password=SEED_PASSWORD,
            )
            self._ensure_user(
                email=ADMIN_EMAIL,
                first_name="Park",
                last_name="Admin",
                role=User.ROLE_ADMIN,
                password=ADMIN_PASSWORD,
            )

        self.stdout.write(self.style.SUCCESS("Development seed data created."))
        self.stdout.write(self.style.NOTICE(f"Visitor login visitor@splashtown.test password: {SEED_PASSWORD}"))
        self.stdout.write(self.style.NOTICE(f"Admin login {ADMIN_EMAIL} password: {ADMIN_PASSWORD}"))

    def _ensure_ride(self, data: dict) -> Ride:
        defaults = {key: value for key, value in data.items() if key != "name"}
        ride, created = Ride.objects.update_or_create(name=data["name"], defaults=defaults)
        if created:
            self.stdout.write(self.style.NOTICE(f"Added ride {ride.name}"))
        return ride

    def _ensure_food(self, *, name: str, **defaults) -> FoodItem:
        food, created = FoodItem.objects.update_or_create(name=name, defaults=defaults)
        if created:
            self.stdout.write(self.style.NOTICE(f"Added menu item {food.name}"))
        return food

    def _ensure_user(
        self,
        email: str,
        first_name: str,
        last_name: str,
        role: str,
        password: str,
    ) -> User:
        user, created = User.objects.get_or_create(
            email=email,
            defaults={
                "username": email,
                "first_name": first_name,
                "last_name": last_name,
                "display_name": f"{first_name} {last_name}",
                "role": role,
                "is_staff": role == User.ROLE_ADMIN,
            },
        )
        if user.role != role:
            user.role = role
            user.save(update_fields=["role"])
        if created or not user.has_usable_password():
            user.set_password(password)
            user.save(update_fields=["password"])
        return user
