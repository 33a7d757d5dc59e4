# examples/add_only_suite.py
# A custom suite factory for the runner: only enters todos, never checks
# or removes them. Useful to eyeball the list with --headed.
#
#   python -m todobench.runner run examples.add_only_suite:build --items 5 --headed

from todobench.suite import PressEnter, InputTodo, Step, Suite, get_facts


def build(num_items: int = 10) -> Suite:
    steps = []
    for i in range(num_items):
        steps.append(Step(name=f"Inputing {i}", work=InputTodo(i)))
        steps.append(Step(name=f"Entering {i}", work=PressEnter()))
    return Suite(get_facts=get_facts, steps=steps)
