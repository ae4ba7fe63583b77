# backend/tasks/views.py
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from workboard.scope import TenantScope
from . import store
from .board import build_board
from .models import Task
from .serializers import (
    BoardColumnSerializer,
    BoardProgressSerializer,
    TaskInputSerializer,
    TaskSerializer,
    TaskStatusSerializer,
)


def task_not_found(task_id):
    return Response({"error": f"task {task_id} not found"}, status=status.HTTP_404_NOT_FOUND)


class TaskListCreateAPIView(APIView):
    def get(self, request):
        tasks = store.get_tasks(TenantScope.from_request(request))
        return Response({"tasks": TaskSerializer(tasks, many=True).data}, status=status.HTTP_200_OK)

    def post(self, request):
        ser = TaskInputSerializer(data=request.data)
        if not ser.is_valid():
            return Response({"validation_errors": ser.errors}, status=status.HTTP_400_BAD_REQUEST)

        task = store.add_task(TenantScope.from_request(request), **ser.validated_data)
        return Response(TaskSerializer(task).data, status=status.HTTP_201_CREATED)


class TaskDetailAPIView(APIView):
    def get(self, request, task_id):
        try:
            task = store.get_task(task_id, TenantScope.from_request(request))
        except Task.DoesNotExist:
            return task_not_found(task_id)
        return Response(TaskSerializer(task).data, status=status.HTTP_200_OK)

    def put(self, request, task_id):
        ser = TaskInputSerializer(data=request.data)
        if not ser.is_valid():
            return Response({"validation_errors": ser.errors}, status=status.HTTP_400_BAD_REQUEST)

        scope = TenantScope.from_request(request)
        try:
            store.update_task(task_id, scope, **ser.validated_data)
        except Task.DoesNotExist:
            return task_not_found(task_id)
        return Response(TaskSerializer(store.get_task(task_id, scope)).data, status=status.HTTP_200_OK)


class TaskStatusAPIView(APIView):
    """
    PATCH payload: {"status": "In Progress"}
    Used by drag-and-drop between board columns. Only the status is stored.
    """
    def patch(self, request, task_id):
        ser = TaskStatusSerializer(data=request.data)
        if not ser.is_valid():
            return Response({"validation_errors": ser.errors}, status=status.HTTP_400_BAD_REQUEST)

        scope = TenantScope.from_request(request)
        try:
            store.set_task_state(task_id, ser.validated_data["status"], scope)
        except Task.DoesNotExist:
            return task_not_found(task_id)
        return Response(TaskSerializer(store.get_task(task_id, scope)).data, status=status.HTTP_200_OK)


class TaskToggleAPIView(APIView):
    # checkbox on a card: Done <-> To Do
    def post(self, request, task_id):
        scope = TenantScope.from_request(request)
        try:
            store.toggle_task_done(task_id, scope)
        except Task.DoesNotExist:
            return task_not_found(task_id)
        return Response(TaskSerializer(store.get_task(task_id, scope)).data, status=status.HTTP_200_OK)


class TaskBoardAPIView(APIView):
    def get(self, request):
        tasks = store.get_tasks(TenantScope.from_request(request))
        columns, progress = build_board(tasks)
        return Response(
            {
                "columns": BoardColumnSerializer(columns, many=True).data,
                "progress": BoardProgressSerializer(progress).data,
            },
            status=status.HTTP_200_OK,
        )
