"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter, ViewState, ModalState, Selection)
- task_store.py: in-memory collection with write-through persistence
- task_persistence.py: load/save of the collection in one key-value slot
- task_view.py: pure filter/search/sort derivation of the display list
- modal_controller.py: edit / confirm-delete dialog state machine
- task_api.py: presentation intents and the render model
"""
