from .models import BOARD_COLUMNS, TaskStatus


def build_board(tasks):
    """
    Group tasks into the three board columns, keeping list order.

    Tasks whose status is not a column title land in no column. Only the
    status is persisted, so order inside a column follows the task list.
    """
    columns = [
        {"status": str(column), "tasks": [t for t in tasks if t.status == column]}
        for column in BOARD_COLUMNS
    ]
    return columns, progress(tasks)


def progress(tasks):
    total = len(tasks)
    completed = sum(1 for t in tasks if t.status == TaskStatus.DONE)
    percentage = 0.0 if total == 0 else round(completed / total * 100, 2)
    return {"completed": completed, "total": total, "percentage": percentage}
