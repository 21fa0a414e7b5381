"""
Customer API views.
"""

import logging

from django.db.models import Q

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from .models import Customer
from .serializers import CustomerSerializer

logger = logging.getLogger(__name__)


def _get_customer(customer_id):
    try:
        return Customer.objects.get(id=customer_id)
    except Customer.DoesNotExist:
        return None


@api_view(["GET", "POST"])
@permission_classes([permissions.IsAuthenticated])
def customer_list(request):
    """
    List or create customers.

    Query parameters:
    - search: Matches name, phone, or email (case-insensitive)
    """
    if request.method == "POST":
        serializer = CustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        customer = serializer.save()
        logger.info("Customer %s created by %s", customer.id, request.user.username)
        return Response({"customer": CustomerSerializer(customer).data}, status=status.HTTP_201_CREATED)

    queryset = Customer.objects.all()

    query = request.query_params.get("search", "").strip()
    if query:
        queryset = queryset.filter(
            Q(name__icontains=query) | Q(phone__icontains=query) | Q(email__icontains=query)
        )

    return Response({"customers": CustomerSerializer(queryset, many=True).data})


@api_view(["PATCH", "DELETE"])
@permission_classes([permissions.IsAuthenticated])
def customer_detail(request, customer_id):
    """Update or delete a single customer."""
    customer = _get_customer(customer_id)
    if customer is None:
        return Response({"error": "Customer not found."}, status=status.HTTP_404_NOT_FOUND)

    if request.method == "DELETE":
        customer.delete()
        logger.info("Customer %s deleted by %s", customer_id, request.user.username)
        return Response({"message": "Customer deleted."})

    serializer = CustomerSerializer(customer, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    customer = serializer.save()
    return Response({"customer": CustomerSerializer(customer).data})
