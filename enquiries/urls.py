from django.urls import path

from .views import EnquiryDetail, EnquiryList

urlpatterns = [
    path("api/enquiries/", EnquiryList.as_view(), name="enquiries"),
    path("api/enquiries/<int:pk>/", EnquiryDetail.as_view(), name="enquiry"),
]
