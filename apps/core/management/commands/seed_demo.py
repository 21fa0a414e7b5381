"""
Management command to reset the database to a small demo data set.
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.core.models import User
from apps.crm.models import Customer
from apps.documents import services
from apps.documents.models import Document
from apps.inventory.models import Product

DEMO_USERS = [
    ("owner", "owner123", "Shop Owner", User.OWNER),
    ("admin", "admin123", "Back Office Admin", User.ADMIN),
]

DEMO_CUSTOMERS = [
    ("Thai Technology Co., Ltd.", "02-123-4567", "contact@thaitech.co.th"),
    ("Digital Innovation Co., Ltd.", "02-234-5678", "info@digitalinno.co.th"),
    ("Smart Solution Partnership", "02-345-6789", "smart@solution.co.th"),
    ("Thaicom Systems Co., Ltd.", "02-456-7890", "sales@thaicomsys.com"),
    ("IT World Shop", "081-567-8901", "itworld@gmail.com"),
]

DEMO_PRODUCTS = [
    ("Lenovo IdeaPad 3 Notebook", "NB-LEN-001", "18900.00", 15),
    ("LG 24in Full HD Monitor", "MON-LG-001", "4500.00", 30),
    ("Logitech MK470 Wireless Keyboard", "KB-LOG-001", "1290.00", 50),
    ("Logitech M650 Wireless Mouse", "MS-LOG-001", "890.00", 60),
    ("Sony WH-1000XM4 Headphones", "HP-SNY-001", "9900.00", 8),
    ("Logitech C920 Webcam", "CAM-LOG-001", "2490.00", 25),
    ("USB-C Hub 7-in-1", "HUB-UC-001", "1590.00", 40),
    ("Samsung T7 1TB External SSD", "SSD-SAM-001", "3990.00", 20),
]


class Command(BaseCommand):
    help = "Clear all data and create demo users, customers, products and documents"

    def add_arguments(self, parser):
        parser.add_argument(
            "--no-input",
            action="store_true",
            help="Do not ask for confirmation before deleting existing data",
        )

    def handle(self, *args, **options):
        if not options["no_input"]:
            answer = input("This deletes all users, customers, products and documents. Continue? [y/N] ")
            if answer.strip().lower() != "y":
                self.stdout.write("Aborted.")
                return

        with transaction.atomic():
            self._clear()
            owner, admin = self._create_users()
            customers = self._create_customers()
            products = self._create_products()
            self._create_documents(owner, admin, customers, products)

        self.stdout.write(self.style.SUCCESS("Demo data created."))
        self.stdout.write("  Login: owner / owner123 (owner), admin / admin123 (admin)")

    def _clear(self):
        Document.objects.all().delete()
        Product.objects.all().delete()
        Customer.objects.all().delete()
        User.objects.all().delete()
        self.stdout.write("Cleared existing data")

    def _create_users(self):
        users = []
        for username, password, full_name, role in DEMO_USERS:
            users.append(
                User.objects.create_user(
                    username=username,
                    password=password,
                    full_name=full_name,
                    role=role,
                    is_staff=role == User.OWNER,
                    is_superuser=role == User.OWNER,
                )
            )
        self.stdout.write(f"Created users: {', '.join(u.username for u in users)}")
        return users

    def _create_customers(self):
        customers = [
            Customer.objects.create(name=name, phone=phone, email=email)
            for name, phone, email in DEMO_CUSTOMERS
        ]
        self.stdout.write(f"Created {len(customers)} customers")
        return customers

    def _create_products(self):
        products = [
            Product.objects.create(name=name, sku=sku, price=Decimal(price), stock=stock)
            for name, sku, price, stock in DEMO_PRODUCTS
        ]
        self.stdout.write(f"Created {len(products)} products")
        return products

    def _create_documents(self, owner, admin, customers, products):
        def line(product, quantity):
            return {"product": product, "quantity": quantity, "unit_price": product.price}

        quotation = services.create_document(
            doc_type=Document.QUOTATION,
            customer=customers[0],
            items=[line(products[0], 2), line(products[1], 2), line(products[2], 2)],
            notes="Valid for 30 days",
            user=owner,
        )
        services.create_document(
            doc_type=Document.QUOTATION,
            customer=customers[1],
            items=[line(products[4], 1), line(products[5], 3)],
            status=Document.CONFIRMED,
            user=admin,
        )
        services.create_document(
            doc_type=Document.VOI,
            customer=customers[2],
            items=[line(products[3], 10), line(products[6], 5)],
            status=Document.CONFIRMED,
            user=admin,
        )
        services.create_document(
            doc_type=Document.RECEIPT,
            customer=customers[3],
            items=[line(products[7], 4)],
            status=Document.CONFIRMED,
            user=owner,
        )
        services.convert_to_receipt(quotation.id, owner)

        self.stdout.write(f"Created {Document.objects.count()} documents")
