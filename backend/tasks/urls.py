from django.urls import path
from .views import (
    TaskBoardAPIView,
    TaskDetailAPIView,
    TaskListCreateAPIView,
    TaskStatusAPIView,
    TaskToggleAPIView,
)

urlpatterns = [
    path("tasks/", TaskListCreateAPIView.as_view(), name="task-list"),
    path("tasks/board/", TaskBoardAPIView.as_view(), name="task-board"),
    path("tasks/<int:task_id>/", TaskDetailAPIView.as_view(), name="task-detail"),
    path("tasks/<int:task_id>/status/", TaskStatusAPIView.as_view(), name="task-status"),
    path("tasks/<int:task_id>/toggle/", TaskToggleAPIView.as_view(), name="task-toggle"),
]
