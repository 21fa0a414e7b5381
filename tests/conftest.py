"""
Pytest configuration and fixtures for the POS back office.
"""

from decimal import Decimal

import pytest


@pytest.fixture
def api_client():
    """
    Fixture for Django REST framework API client.
    """
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def owner_user(db, django_user_model):
    return django_user_model.objects.create_user(
        username="owner",
        password="owner-pass-123",
        full_name="Shop Owner",
        role="owner",
    )


@pytest.fixture
def admin_user(db, django_user_model):
    """
    Back-office admin (the ``admin`` role, not a Django superuser).
    """
    return django_user_model.objects.create_user(
        username="clerk",
        password="clerk-pass-123",
        full_name="Front Desk",
        role="admin",
    )


@pytest.fixture
def owner_client(owner_user):
    from rest_framework.test import APIClient

    client = APIClient()
    client.force_authenticate(user=owner_user)
    return client


@pytest.fixture
def admin_api_client(admin_user):
    from rest_framework.test import APIClient

    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def customer(db):
    from apps.crm.models import Customer

    return Customer.objects.create(
        name="Thai Technology Co., Ltd.",
        phone="02-123-4567",
        email="contact@thaitech.co.th",
    )


@pytest.fixture
def products(db):
    """Notebook, monitor and keyboard priced 18900, 4500 and 1290."""
    from apps.inventory.models import Product

    return [
        Product.objects.create(
            name="Lenovo IdeaPad 3", sku="NB-LEN-001", price=Decimal("18900.00"), stock=15
        ),
        Product.objects.create(
            name="LG 24in Monitor", sku="MON-LG-001", price=Decimal("4500.00"), stock=30
        ),
        Product.objects.create(
            name="Logitech MK470", sku="KB-LOG-001", price=Decimal("1290.00"), stock=50
        ),
    ]


@pytest.fixture
def line_items(products):
    """Two of each product: line totals 37800, 9000 and 2580."""
    return [{"product": product, "quantity": 2, "unit_price": product.price} for product in products]


@pytest.fixture
def quotation(customer, line_items, owner_user):
    from apps.documents import services

    return services.create_document(
        doc_type="quotation",
        customer=customer,
        items=line_items,
        notes="Valid for 30 days",
        user=owner_user,
    )
