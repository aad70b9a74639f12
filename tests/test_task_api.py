# tests/test_task_api.py

from __future__ import annotations

from taskpad.core.state import AppState
from taskpad.tasks import task_api
from taskpad.tasks.task_models import ModalKind, TaskFilter


def _texts(state: AppState) -> list[str]:
    return [t.text for t in task_api.visible_tasks(state)]


def test_filter_and_search_scenario(state: AppState) -> None:
    t1 = task_api.add_task(state, "Buy milk")
    t2 = task_api.add_task(state, "Wash car")
    assert t1 and t2
    task_api.toggle_task(state, t1.id)

    task_api.set_filter(state, "active")
    assert [t.id for t in task_api.visible_tasks(state)] == [t2.id]

    task_api.set_filter(state, TaskFilter.COMPLETED)
    assert [t.id for t in task_api.visible_tasks(state)] == [t1.id]

    task_api.set_search(state, "wash")
    task_api.set_filter(state, "all")
    assert [t.id for t in task_api.visible_tasks(state)] == [t2.id]


def test_empty_draft_save_scenario(state: AppState) -> None:
    task_api.add_task(state, "Buy milk")
    t2 = task_api.add_task(state, "Wash car")
    assert t2 is not None

    assert task_api.begin_edit(state, t2.id) is True
    model = task_api.render_model(state)
    assert model.active_modal is ModalKind.EDIT
    assert model.edit_draft_text == "Wash car"

    task_api.change_draft(state, "")
    assert task_api.save_edit(state) is False

    model = task_api.render_model(state)
    assert model.active_modal is ModalKind.EDIT
    assert model.can_save is False
    assert state.store.get(t2.id).text == "Wash car"  # type: ignore[union-attr]


def test_confirm_delete_scenario(state: AppState) -> None:
    t1 = task_api.add_task(state, "Buy milk")
    t2 = task_api.add_task(state, "Wash car")
    assert t1 and t2

    task_api.request_delete(state, t1.id)
    model = task_api.render_model(state)
    assert model.active_modal is ModalKind.DELETE
    assert model.pending_delete == t1

    assert task_api.confirm_delete(state) is True
    assert [t.id for t in state.store.tasks] == [t2.id]
    assert task_api.render_model(state).active_modal is ModalKind.NONE


def test_highlight_is_sticky_across_filter_and_sort(state: AppState) -> None:
    a = task_api.add_task(state, "a")
    task_api.add_task(state, "b")
    assert a is not None
    task_api.select_task(state, a.id)

    task_api.set_filter(state, "completed")
    task_api.toggle_sort_order(state)
    task_api.set_search(state, "zzz")

    assert task_api.render_model(state).highlighted_task_id == a.id


def test_toggle_and_select_are_independent(state: AppState) -> None:
    a = task_api.add_task(state, "a")
    b = task_api.add_task(state, "b")
    assert a and b

    task_api.toggle_task(state, a.id)
    assert state.store.highlighted_task_id == b.id

    task_api.select_task(state, a.id)
    assert state.store.highlighted_task_id == a.id
    assert state.store.get(a.id).completed is True  # type: ignore[union-attr]


def test_render_model_counts_full_collection(state: AppState) -> None:
    a = task_api.add_task(state, "alpha")
    task_api.add_task(state, "beta")
    task_api.add_task(state, "gamma")
    assert a is not None
    task_api.toggle_task(state, a.id)

    task_api.set_search(state, "gamma")
    model = task_api.render_model(state)

    assert [t.text for t in model.tasks] == ["gamma"]
    assert model.active_count == 2
    assert model.total == 3
    assert model.has_completed is True


def test_sort_toggle_reverses_display(state: AppState) -> None:
    for name in ("first", "second", "third"):
        task_api.add_task(state, name)

    assert _texts(state) == ["third", "second", "first"]
    assert task_api.toggle_sort_order(state) is False
    assert _texts(state) == ["first", "second", "third"]


def test_clear_completed_intent(state: AppState) -> None:
    a = task_api.add_task(state, "a")
    task_api.add_task(state, "b")
    assert a is not None

    assert task_api.clear_completed(state) == 0
    task_api.toggle_task(state, a.id)
    assert task_api.clear_completed(state) == 1
    assert _texts(state) == ["b"]
    assert task_api.render_model(state).has_completed is False


def test_unknown_filter_falls_back_to_all(state: AppState) -> None:
    assert task_api.set_filter(state, "weird") is TaskFilter.ALL


def test_close_modal_intent(state: AppState) -> None:
    a = task_api.add_task(state, "a")
    assert a is not None
    task_api.begin_edit(state, a.id)
    task_api.close_modal(state)

    model = task_api.render_model(state)
    assert model.active_modal is ModalKind.NONE
    assert model.edit_draft_text == ""
    assert model.pending_delete is None
