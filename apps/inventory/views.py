"""
Product API views.
"""

import logging

from django.db.models import Q

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from .models import Product
from .serializers import ProductSerializer

logger = logging.getLogger(__name__)


@api_view(["GET", "POST"])
@permission_classes([permissions.IsAuthenticated])
def product_list(request):
    """
    List or create products.

    Query parameters:
    - search: Matches name or SKU (case-insensitive)
    """
    if request.method == "POST":
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()
        logger.info("Product %s created by %s", product.id, request.user.username)
        return Response({"product": ProductSerializer(product).data}, status=status.HTTP_201_CREATED)

    queryset = Product.objects.all()

    query = request.query_params.get("search", "").strip()
    if query:
        queryset = queryset.filter(Q(name__icontains=query) | Q(sku__icontains=query))

    return Response({"products": ProductSerializer(queryset, many=True).data})


@api_view(["PATCH", "DELETE"])
@permission_classes([permissions.IsAuthenticated])
def product_detail(request, product_id):
    """Update or delete a single product."""
    try:
        product = Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        return Response({"error": "Product not found."}, status=status.HTTP_404_NOT_FOUND)

    if request.method == "DELETE":
        product.delete()
        logger.info("Product %s deleted by %s", product_id, request.user.username)
        return Response({"message": "Product deleted."})

    serializer = ProductSerializer(product, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    product = serializer.save()
    return Response({"product": ProductSerializer(product).data})
