"""Form-driven task editor."""

from taskpad.editor.view import ADD_LABEL, UPDATE_LABEL, TaskEditorView, TaskForm

__all__ = ["ADD_LABEL", "UPDATE_LABEL", "TaskEditorView", "TaskForm"]
