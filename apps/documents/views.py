"""
Document API views.

Routes:
    GET    /api/documents                 list (filters: type, status, search)
    POST   /api/documents                 create
    GET    /api/documents/<id>            retrieve
    PATCH  /api/documents/<id>            partial update
    DELETE /api/documents/<id>            delete
    POST   /api/documents/<id>/convert    quotation -> receipt
    GET    /api/documents/stats/summary   dashboard figures
"""

from django.db.models import Q

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .models import Document
from .serializers import (
    DocumentCreateSerializer,
    DocumentSerializer,
    DocumentSummarySerializer,
    DocumentUpdateSerializer,
)

DOC_TYPES = {value for value, _ in Document.DOC_TYPE_CHOICES}
STATUSES = {value for value, _ in Document.STATUS_CHOICES}


def _document_queryset():
    return Document.objects.prefetch_related("items")


class DocumentListView(APIView):
    """
    List or create documents.

    Query parameters:
    - type: quotation|voi|receipt (unknown values are ignored)
    - status: draft|confirmed|converted|cancelled (unknown values are ignored)
    - search: Matches document number or customer name (case-insensitive)
    """

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        queryset = _document_queryset().order_by("-created_at")

        doc_type = request.query_params.get("type")
        if doc_type in DOC_TYPES:
            queryset = queryset.filter(doc_type=doc_type)

        doc_status = request.query_params.get("status")
        if doc_status in STATUSES:
            queryset = queryset.filter(status=doc_status)

        search = request.query_params.get("search", "").strip()
        if search:
            queryset = queryset.filter(
                Q(doc_number__icontains=search) | Q(customer_name__icontains=search)
            )

        return Response({"documents": DocumentSerializer(queryset, many=True).data})

    def post(self, request):
        """
        Create a document.

        Request body:
        {
            "docType": "quotation|voi|receipt",
            "customerId": "uuid" (optional),
            "customerName": "..." (optional, resolved from customerId),
            "items": [
                {
                    "productId": "uuid",
                    "productName": "..." (optional, resolved from the product),
                    "quantity": 2,
                    "unitPrice": 1260.00 (optional, uses current price)
                }
            ],
            "notes": "" (optional),
            "status": "draft|confirmed" (optional, default: draft)
        }
        """
        serializer = DocumentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        document = services.create_document(user=request.user, **serializer.validated_data)
        document = _document_queryset().get(id=document.id)
        return Response(
            {"document": DocumentSerializer(document).data},
            status=status.HTTP_201_CREATED,
        )


class DocumentDetailView(APIView):
    """Retrieve, update or delete a single document."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, document_id):
        document = services.get_document(document_id)
        return Response({"document": DocumentSerializer(document).data})

    def patch(self, request, document_id):
        # Check existence first so an unknown id is a 404 even with a bad body
        services.get_document(document_id)

        serializer = DocumentUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        document = services.update_document(document_id, serializer.validated_data)
        document = _document_queryset().get(id=document.id)
        return Response({"document": DocumentSerializer(document).data})

    def delete(self, request, document_id):
        services.delete_document(document_id)
        return Response({"message": "Document deleted."})


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
def document_convert(request, document_id):
    """Convert a quotation into a confirmed receipt."""
    receipt = services.convert_to_receipt(document_id, request.user)
    receipt = _document_queryset().get(id=receipt.id)
    return Response({"document": DocumentSerializer(receipt).data}, status=status.HTTP_201_CREATED)


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def document_stats(request):
    """Revenue from confirmed receipts and document counts per type."""
    summary = services.summarize_documents()
    return Response({"stats": DocumentSummarySerializer(summary).data})
