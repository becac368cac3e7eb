"""Tests for figma_codegen.context.GenerationContext."""

from figma_codegen.context import GenerationContext
from figma_codegen.models import (
    ComponentInfo,
    EventHandler,
    HandlerKind,
    InteractionKind,
    InteractiveElement,
    StateType,
    StateVariable,
)


def _populated() -> GenerationContext:
    ctx = GenerationContext()
    ctx.register_interactive(InteractiveElement("1:2", InteractionKind.INPUT, "email", "Email"))
    ctx.add_state_variable(StateVariable("email", StateType.STRING, ""))
    ctx.add_event_handler(EventHandler("email", HandlerKind.CHANGE))
    ctx.register_component("1:5", ComponentInfo("Card", {"id": "1:5"}, "1:1"))
    ctx.next_anonymous_index()
    return ctx


class TestPopulation:

    def test_state_variables_deduplicated_by_identifier(self):
        ctx = GenerationContext()
        assert ctx.add_state_variable(StateVariable("open", StateType.BOOLEAN, False))
        assert not ctx.add_state_variable(StateVariable("open", StateType.STRING, ""))
        assert ctx.state_variables == [StateVariable("open", StateType.BOOLEAN, False)]

    def test_event_handlers_deduplicated_by_identifier(self):
        ctx = GenerationContext()
        ctx.add_event_handler(EventHandler("save", HandlerKind.CLICK))
        ctx.add_event_handler(EventHandler("save", HandlerKind.TOGGLE))
        assert ctx.event_handlers == [EventHandler("save", HandlerKind.CLICK)]

    def test_interactive_registration_overwrites(self):
        ctx = GenerationContext()
        ctx.register_interactive(InteractiveElement("1:2", InteractionKind.BUTTON, "go"))
        ctx.register_interactive(InteractiveElement("1:2", InteractionKind.INPUT, "go"))
        assert ctx.interactive_elements["1:2"].kind == InteractionKind.INPUT

    def test_anonymous_counter(self):
        ctx = GenerationContext()
        assert [ctx.next_anonymous_index() for _ in range(3)] == [1, 2, 3]

    def test_aggregation_threshold(self):
        ctx = GenerationContext()
        for i in range(3):
            ctx.add_state_variable(StateVariable(f"v{i}", StateType.BOOLEAN, False))
        assert ctx.update_state_aggregation() is False
        ctx.add_state_variable(StateVariable("v3", StateType.BOOLEAN, False))
        assert ctx.update_state_aggregation() is True

    def test_find_interactive_by_identifier(self):
        ctx = _populated()
        assert ctx.find_interactive_by_identifier("email").node_id == "1:2"
        assert ctx.find_interactive_by_identifier("missing") is None


class TestIsolation:

    def test_snapshot_is_independent(self):
        ctx = _populated()
        saved = ctx.snapshot()
        ctx.add_state_variable(StateVariable("extra", StateType.BOOLEAN, False))
        ctx.interactive_elements["1:2"].identifier = "changed"
        ctx.components["1:5"].name = "Renamed"
        assert [v.identifier for v in saved.state_variables] == ["email"]
        assert saved.interactive_elements["1:2"].identifier == "email"
        assert saved.components["1:5"].name == "Card"

    def test_snapshot_shares_subtree_references(self):
        ctx = _populated()
        saved = ctx.snapshot()
        assert saved.components["1:5"].node is ctx.components["1:5"].node

    def test_reset(self):
        ctx = _populated()
        ctx.use_aggregated_state = True
        ctx.reset()
        assert ctx == GenerationContext()

    def test_restore(self):
        ctx = _populated()
        saved = ctx.snapshot()
        ctx.reset()
        ctx.restore(saved)
        assert ctx.component_counter == 1
        assert list(ctx.components) == ["1:5"]
        assert ctx.get_state_variable("email") is not None
