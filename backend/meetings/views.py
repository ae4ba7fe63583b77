# backend/meetings/views.py
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from workboard.scope import TenantScope
from . import store
from .invites import send_meeting_invite
from .models import ScheduledCall
from .serializers import (
    CalendarWindowSerializer,
    InviteSerializer,
    ScheduleCallSerializer,
    ScheduledCallSerializer,
)


def call_not_found(call_id):
    return Response({"error": f"call {call_id} not found"}, status=status.HTTP_404_NOT_FOUND)


class ScheduledCallListCreateAPIView(APIView):
    def get(self, request):
        # optional ?start=...&end=... to fetch one calendar month/week/day
        window = CalendarWindowSerializer(data=request.query_params)
        if not window.is_valid():
            return Response({"validation_errors": window.errors}, status=status.HTTP_400_BAD_REQUEST)

        calls = store.list_calls(TenantScope.from_request(request), **window.validated_data)
        return Response({"calls": ScheduledCallSerializer(calls, many=True).data}, status=status.HTTP_200_OK)

    def post(self, request):
        """
        POST payload: {"starts_at": "...", "ends_at": "...", "title": "...",
                       "description": "...", "emails": ["a@b.com"] or "a@b.com, c@d.com"}
        The call is kept even when the invite email fails.
        """
        ser = ScheduleCallSerializer(data=request.data)
        if not ser.is_valid():
            return Response({"validation_errors": ser.errors}, status=status.HTTP_400_BAD_REQUEST)

        data = dict(ser.validated_data)
        emails = data.pop("emails")
        call = store.schedule_call(TenantScope.from_request(request), **data)
        invite_sent = send_meeting_invite(call, emails)
        return Response(
            {**ScheduledCallSerializer(call).data, "invite_sent": invite_sent},
            status=status.HTTP_201_CREATED,
        )


class ScheduledCallDetailAPIView(APIView):
    def get(self, request, call_id):
        try:
            call = store.get_call(call_id, TenantScope.from_request(request))
        except ScheduledCall.DoesNotExist:
            return call_not_found(call_id)
        return Response(ScheduledCallSerializer(call).data, status=status.HTTP_200_OK)


class ScheduledCallInviteAPIView(APIView):
    def post(self, request, call_id):
        ser = InviteSerializer(data=request.data)
        if not ser.is_valid():
            return Response({"validation_errors": ser.errors}, status=status.HTTP_400_BAD_REQUEST)

        try:
            call = store.get_call(call_id, TenantScope.from_request(request))
        except ScheduledCall.DoesNotExist:
            return call_not_found(call_id)

        emails = ser.validated_data["emails"]
        if not send_meeting_invite(call, emails):
            return Response({"error": "Failed to send email invite"}, status=status.HTTP_502_BAD_GATEWAY)
        return Response({"status": "ok", "call_id": str(call.id), "emails": emails}, status=status.HTTP_200_OK)
