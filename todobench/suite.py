from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

DEFAULT_NUM_ITEMS = 100

NEW_TODO_CLASS = "new-todo"
TOGGLE_CLASS = "toggle"
DESTROY_CLASS = "destroy"

ENTER_KEY = "Enter"
ENTER_KEY_CODE = 13


class Element(Protocol):
    value: str

    def dispatch_event(self, type: str, event_init: Optional[dict] = None) -> None: ...

    def click(self) -> None: ...


class Document(Protocol):
    def get_elements_by_class_name(self, class_name: str) -> Sequence[Element]: ...


@dataclass(frozen=True)
class Facts:
    doc: Document
    input: Element


@dataclass(frozen=True)
class Step:
    name: str
    work: Callable[[Facts], None]


@dataclass(frozen=True)
class Suite:
    """
    What a harness needs to run one interaction suite.

    `get_facts` is called once per run; `steps` are replayed in order with
    the facts it returned.
    """
    get_facts: Callable[[Any], Optional[Facts]]
    steps: List[Step]


def get_facts(doc: Document) -> Optional[Facts]:
    """Return the facts for `doc`, or None when it has no new-todo input."""
    elements = doc.get_elements_by_class_name(NEW_TODO_CLASS)
    if not elements:
        return None
    return Facts(doc=doc, input=elements[0])


# ---- Step work ----
# Each work object carries its own parameters, so a step never depends on
# a loop variable that changed after it was built.


@dataclass(frozen=True)
class InputTodo:
    number: int

    @property
    def label(self) -> str:
        return f"Nom Nom {self.number}"

    def __call__(self, facts: Facts) -> None:
        node = facts.input
        node.value = self.label
        node.dispatch_event("input", {"bubbles": True, "cancelable": True})


@dataclass(frozen=True)
class PressEnter:
    def __call__(self, facts: Facts) -> None:
        facts.input.dispatch_event(
            "keydown",
            {
                "bubbles": True,
                "cancelable": True,
                "key": ENTER_KEY,
                "keyCode": ENTER_KEY_CODE,
                "which": ENTER_KEY_CODE,
            },
        )


@dataclass(frozen=True)
class Click:
    class_name: str
    index: int

    def __call__(self, facts: Facts) -> None:
        # No bounds check: a missing element is a broken step list.
        facts.doc.get_elements_by_class_name(self.class_name)[self.index].click()


def add_complete_delete_steps(num_items: int) -> List[Step]:
    """
    Build the add / complete / delete step list for `num_items` todos.

    Every todo is entered before any is checked, and every todo is checked
    before any is removed. Removal always clicks the first destroy button
    because each removal shifts the remaining rows up.
    """
    if num_items < 0:
        raise ValueError(f"num_items must be >= 0, got {num_items}")

    steps: List[Step] = []

    for i in range(num_items):
        steps.append(Step(name=f"Inputing {i}", work=InputTodo(i)))
        steps.append(Step(name=f"Entering {i}", work=PressEnter()))

    for i in range(num_items):
        steps.append(Step(name=f"Checking {i}", work=Click(TOGGLE_CLASS, i)))

    for i in range(num_items):
        steps.append(Step(name=f"Removing {i}", work=Click(DESTROY_CLASS, 0)))

    logger.debug("Built %d steps for %d items", len(steps), num_items)
    return steps


def add_complete_delete_suite(num_items: int = DEFAULT_NUM_ITEMS) -> Suite:
    return Suite(get_facts=get_facts, steps=add_complete_delete_steps(num_items))
