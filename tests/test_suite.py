"""
todobench.suite unit tests.
Facts lookup, step ordering and the event each step fires.
"""

import pytest

from todobench.suite import (
    DEFAULT_NUM_ITEMS,
    Click,
    Facts,
    InputTodo,
    PressEnter,
    add_complete_delete_steps,
    add_complete_delete_suite,
    get_facts,
)


class TestGetFacts:
    def test_no_new_todo_returns_none(self, doc):
        doc.body.append(doc.create_element("something-else"))
        assert get_facts(doc) is None

    def test_empty_document_returns_none(self, doc):
        assert get_facts(doc) is None

    def test_returns_doc_and_first_input(self, doc):
        first = doc.body.append(doc.create_element("new-todo"))
        doc.body.append(doc.create_element("new-todo"))

        facts = get_facts(doc)

        assert isinstance(facts, Facts)
        assert facts.doc is doc
        assert facts.input is first


class TestAddCompleteDeleteSteps:
    def test_zero_items_is_empty(self):
        assert add_complete_delete_steps(0) == []

    @pytest.mark.parametrize("n", [1, 2, 7, 100])
    def test_length_is_four_per_item(self, n):
        assert len(add_complete_delete_steps(n)) == 4 * n

    def test_two_items_order(self):
        names = [s.name for s in add_complete_delete_steps(2)]
        assert names == [
            "Inputing 0",
            "Entering 0",
            "Inputing 1",
            "Entering 1",
            "Checking 0",
            "Checking 1",
            "Removing 0",
            "Removing 1",
        ]

    def test_removing_always_targets_first_destroy(self):
        removing = [s for s in add_complete_delete_steps(5) if s.name.startswith("Removing")]
        assert len(removing) == 5
        assert all(s.work == Click("destroy", 0) for s in removing)

    def test_checking_targets_own_toggle(self):
        checking = [s for s in add_complete_delete_steps(5) if s.name.startswith("Checking")]
        for i, step in enumerate(checking):
            assert step.name == f"Checking {i}"
            assert step.work == Click("toggle", i)

    def test_input_steps_capture_their_own_index(self):
        inputs = [s.work for s in add_complete_delete_steps(3) if s.name.startswith("Inputing")]
        assert inputs == [InputTodo(0), InputTodo(1), InputTodo(2)]

    def test_negative_count_raises(self):
        with pytest.raises(ValueError):
            add_complete_delete_steps(-1)

    def test_default_suite_uses_hundred_items(self):
        suite = add_complete_delete_suite()
        assert DEFAULT_NUM_ITEMS == 100
        assert len(suite.steps) == 4 * DEFAULT_NUM_ITEMS
        assert suite.get_facts is get_facts


class TestStepWork:
    def test_input_sets_value_and_fires_one_input_event(self, doc):
        node = doc.body.append(doc.create_element("new-todo"))
        seen = []
        node.add_event_listener("input", seen.append)

        InputTodo(4)(get_facts(doc))

        assert "4" in node.value
        assert node.value == "Nom Nom 4"
        assert len(seen) == 1
        assert seen[0].bubbles and seen[0].cancelable

    def test_press_enter_fires_one_keydown_with_code_13(self, doc):
        node = doc.body.append(doc.create_element("new-todo"))
        keydowns = []
        node.add_event_listener("keydown", keydowns.append)

        PressEnter()(get_facts(doc))

        assert len(keydowns) == 1
        event = keydowns[0]
        assert event.keyCode == 13
        assert event.which == 13
        assert event.key == "Enter"
        assert event.bubbles

    def test_keydown_bubbles_to_parent(self, doc):
        form = doc.body.append(doc.create_element("form"))
        form.append(doc.create_element("new-todo"))
        seen = []
        form.add_event_listener("keydown", seen.append)

        PressEnter()(get_facts(doc))

        assert len(seen) == 1

    def test_click_hits_element_at_index(self, doc):
        doc.body.append(doc.create_element("new-todo"))
        buttons = [doc.body.append(doc.create_element("toggle")) for _ in range(3)]
        clicked = []
        for i, b in enumerate(buttons):
            b.add_event_listener("click", lambda e, i=i: clicked.append(i))

        Click("toggle", 2)(get_facts(doc))

        assert clicked == [2]

    def test_click_out_of_range_raises_index_error(self, doc):
        doc.body.append(doc.create_element("new-todo"))
        with pytest.raises(IndexError):
            Click("destroy", 0)(get_facts(doc))


class TestEndToEnd:
    def test_three_items_leave_nothing_behind(self, doc, todo_app):
        suite = add_complete_delete_suite(3)
        facts = suite.get_facts(doc)

        for step in suite.steps:
            step.work(facts)

        assert todo_app.todos == []
        assert doc.get_elements_by_class_name("todo") == []

    def test_all_entries_completed_before_removal(self, doc, todo_app):
        suite = add_complete_delete_suite(3)
        facts = suite.get_facts(doc)

        for step in suite.steps:
            if step.name.startswith("Removing"):
                break
            step.work(facts)

        assert [t.title for t in todo_app.todos] == ["Nom Nom 0", "Nom Nom 1", "Nom Nom 2"]
        assert all(t.completed for t in todo_app.todos)

    def test_extra_removal_fails_loudly(self, doc, todo_app):
        suite = add_complete_delete_suite(1)
        facts = suite.get_facts(doc)
        for step in suite.steps:
            step.work(facts)

        with pytest.raises(IndexError):
            Click("destroy", 0)(facts)
