from django.urls import path
from .views import ScheduledCallDetailAPIView, ScheduledCallInviteAPIView, ScheduledCallListCreateAPIView

urlpatterns = [
    path("meetings/", ScheduledCallListCreateAPIView.as_view(), name="call-list"),
    path("meetings/<uuid:call_id>/", ScheduledCallDetailAPIView.as_view(), name="call-detail"),
    path("meetings/<uuid:call_id>/invite/", ScheduledCallInviteAPIView.as_view(), name="call-invite"),
]
