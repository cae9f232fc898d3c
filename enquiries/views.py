import logging
import math

from django.db import DatabaseError
from django.db.models import Q
from rest_framework import exceptions, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import EnquiryNotFound, StorageFault
from core.permissions import IsAdmin

from .models import Enquiry
from .serializers import EnquirySerializer
from .tasks import notify_new_enquiry

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def query_int(request, name, default, maximum=None):
    try:
        value = int(request.query_params.get(name, default))
    except (TypeError, ValueError):
        value = default
    value = max(value, 1)
    if maximum is not None:
        value = min(value, maximum)
    return value


def paginate_queryset(queryset, page, limit, total):
    start_index = (page - 1) * limit
    # offsets past the end can overflow the database integer type
    if start_index >= total:
        return []
    end_index = start_index + limit
    return queryset[start_index:end_index]


def search_enquiries(search):
    queryset = Enquiry.objects.all()
    if search:
        queryset = queryset.filter(
            Q(client_name__icontains=search) | Q(project_name__icontains=search)
        )
    return queryset.order_by("-created_at", "-id")


def get_enquiry(pk):
    try:
        return Enquiry.objects.get(pk=pk)
    except Enquiry.DoesNotExist:
        raise EnquiryNotFound()


class EnquiryList(APIView):
    def get_permissions(self):
        if self.request.method == "POST":
            return [permissions.AllowAny()]
        return [IsAdmin()]

    def perform_authentication(self, request):
        # authenticate lazily: the public POST must not be rejected for a stale token
        pass

    def get(self, request):
        page = query_int(request, "page", DEFAULT_PAGE)
        limit = query_int(request, "limit", DEFAULT_LIMIT, maximum=MAX_LIMIT)
        search = request.query_params.get("search", "").strip()
        logger.info(f"EnquiryList.get page={page} limit={limit} search={search!r}")

        try:
            queryset = search_enquiries(search)
            total = queryset.count()
            page_items = list(paginate_queryset(queryset, page, limit, total))
        except DatabaseError as e:
            logger.error(f"Error listing enquiries: {e}", exc_info=True)
            raise StorageFault()

        serializer = EnquirySerializer(page_items, many=True)
        return Response(
            {
                "enquiries": serializer.data,
                "totalPages": math.ceil(total / limit),
                "currentPage": page,
                "totalEnquiries": total,
            }
        )

    def post(self, request):
        serializer = EnquirySerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning(
                "Enquiry submission rejected due to invalid data.",
                extra={"errors": serializer.errors},
            )
            raise exceptions.ValidationError(serializer.errors)

        try:
            enquiry = serializer.save()
        except DatabaseError as e:
            logger.error(f"Error saving enquiry: {e}", exc_info=True)
            raise StorageFault()

        logger.info(f"New enquiry {enquiry.id} received from {enquiry.client_name}.")
        try:
            notify_new_enquiry.delay(enquiry.id)
        except Exception:
            logger.error(f"Could not schedule notification for enquiry {enquiry.id}", exc_info=True)

        return Response(serializer.data, status=status.HTTP_201_CREATED)


class EnquiryDetail(APIView):
    permission_classes = [IsAdmin]

    def get(self, request, pk):
        enquiry = get_enquiry(pk)
        return Response(EnquirySerializer(enquiry).data)

    def put(self, request, pk):
        enquiry = get_enquiry(pk)
        serializer = EnquirySerializer(enquiry, data=request.data, partial=True)
        if not serializer.is_valid():
            logger.warning(
                f"Update of enquiry {pk} rejected due to invalid data.",
                extra={"errors": serializer.errors},
            )
            raise exceptions.ValidationError(serializer.errors)

        try:
            serializer.save()
        except DatabaseError as e:
            logger.error(f"Error updating enquiry {pk}: {e}", exc_info=True)
            raise StorageFault()

        logger.info(f"Enquiry {pk} updated.")
        return Response(serializer.data)

    def delete(self, request, pk):
        enquiry = get_enquiry(pk)
        try:
            enquiry.delete()
        except DatabaseError as e:
            logger.error(f"Error deleting enquiry {pk}: {e}", exc_info=True)
            raise StorageFault()

        logger.info(f"Enquiry {pk} deleted.")
        return Response({"message": "Enquiry removed"}, status=status.HTTP_200_OK)
