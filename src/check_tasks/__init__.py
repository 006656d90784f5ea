from check_tasks.scanner import Task, TaskReport, find_uncompleted_tasks, scan_file

__all__ = ["Task", "TaskReport", "find_uncompleted_tasks", "scan_file"]
