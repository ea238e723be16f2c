"""Tests for class-level conformance declarations and behavioural contracts."""

from __future__ import annotations

import logging

import pytest

from capability_dispatch.capabilities.base import Capability, capability_of
from capability_dispatch.capabilities.builtin import (
    Flyable,
    HasIndependentDimensions,
    HasSide,
    Readable,
    Writable,
)
from capability_dispatch.capabilities.configuration import CapabilitySet
from capability_dispatch.capabilities.conformance import (
    ensure_conformance,
    implements,
    verify_contract,
)
from capability_dispatch.capabilities.exceptions import (
    CapabilityBindingError,
    CapabilityContractError,
)
from capability_dispatch.capabilities.registry import CapabilityRegistry
from capability_dispatch.variants.birds import CanadaGoose
from capability_dispatch.variants.geometry import Rectangle, SquareTile


class CoupledSquare:
    """Square that keeps both sides equal whichever one is set."""

    def __init__(self) -> None:
        self.side = 0

    def set_width(self, width: int) -> None:
        self.side = width

    def set_height(self, height: int) -> None:
        self.side = height

    def area(self) -> int:
        return self.side * self.side


class Reader:
    def read(self) -> int:
        return 1


def test_ensure_conformance_returns_capability():
    """Test that a conforming variant returns the resolved capability."""
    assert ensure_conformance(Reader(), Readable) is capability_of(Readable)


def test_ensure_conformance_reports_missing_operations():
    """Test the error raised for a missing operation."""
    with pytest.raises(CapabilityBindingError) as exc_info:
        ensure_conformance(Reader(), Writable)

    assert exc_info.value.capability_name == "writable"
    assert "Reader is missing operations: write" in str(exc_info.value)


def test_ensure_conformance_reports_incompatible_signatures():
    """Test the error raised for an unusable signature."""
    class Grumpy:
        def write(self) -> None:
            return None

    with pytest.raises(CapabilityBindingError, match="incompatible signatures for: write"):
        ensure_conformance(Grumpy, Writable)


def test_ensure_conformance_skips_signatures_when_disabled():
    """Test that signature checks can be turned off."""
    class Grumpy:
        def write(self) -> None:
            return None

    assert ensure_conformance(Grumpy, Writable, check_signatures=False).name == "writable"


def test_ensure_conformance_on_classes_respects_defaults():
    """Test that defaults only count when allowed."""
    ensure_conformance(CanadaGoose, Flyable)

    with pytest.raises(CapabilityBindingError):
        ensure_conformance(CanadaGoose, Flyable, allow_defaults=False)


def test_implements_registers_declared_capabilities():
    """Test that implements records the declared capabilities."""
    registry = CapabilityRegistry()

    @implements(Readable, Writable, registry=registry)
    class Device:
        def read(self) -> int:
            return 0

        def write(self, value: int) -> None:
            return None

    assert registry.get(Device) == frozenset({"readable", "writable"})


def test_implements_accepts_capability_sets():
    """Test that implements expands capability bundles."""
    registry = CapabilityRegistry()
    io = CapabilitySet("io", (Readable, Writable))

    @implements(io, registry=registry)
    class Device:
        def read(self) -> int:
            return 0

        def write(self, value: int) -> None:
            return None

    assert registry.get(Device) == frozenset({"readable", "writable"})


def test_implements_rejects_incomplete_class_at_definition():
    """Test that an incomplete class fails when it is defined."""
    registry = CapabilityRegistry()

    with pytest.raises(CapabilityBindingError, match="missing operations: write"):

        @implements(Writable, registry=registry)
        class Mute:
            def read(self) -> int:
                return 0

    assert dict(registry.snapshot()) == {}


def test_implements_logs_declaration(caplog: pytest.LogCaptureFixture):
    """Test the debug record emitted for a declaration."""
    registry = CapabilityRegistry()

    with caplog.at_level(logging.DEBUG, logger="capability_dispatch.capabilities.conformance"):

        @implements(Readable, registry=registry)
        class Chatty:
            def read(self) -> int:
                return 0

    record = next(
        record
        for record in caplog.records
        if record.getMessage() == "variant conformance declared"
    )
    assert record.context == {"variant": "Chatty", "capabilities": ["readable"]}


def test_rectangle_satisfies_independent_dimensions_contract():
    """Test that Rectangle passes the independent dimensions contract."""
    assert verify_contract(HasIndependentDimensions, Rectangle) is True


def test_square_tile_satisfies_side_contract():
    """Test that SquareTile passes the side contract."""
    assert verify_contract(HasSide, SquareTile) is True


def test_coupled_square_violates_rectangle_contract(caplog: pytest.LogCaptureFixture):
    """Test that coupled sides fail the rectangle contract."""
    with caplog.at_level(logging.WARNING, logger="capability_dispatch"):
        with pytest.raises(CapabilityContractError) as exc_info:
            verify_contract(HasIndependentDimensions, CoupledSquare)

    error = exc_info.value
    assert error.capability_name == "independent_dimensions"
    assert error.variant_name == "CoupledSquare"
    assert error.check_name == "dimensions_are_independent"
    assert caplog.records[-1].getMessage() == "capability contract violated"


def test_coupled_square_is_structurally_a_rectangle():
    """Test that coupled sides still match the rectangle operations."""
    assert capability_of(HasIndependentDimensions).satisfied_by(CoupledSquare())


def test_verify_contract_runs_extra_checks_on_fresh_variants():
    """Test that every extra check receives a fresh variant."""
    seen: list[Rectangle] = []

    def fresh_rectangle_has_no_area(rect: Rectangle) -> bool:
        seen.append(rect)
        return rect.area() == 0

    assert verify_contract(
        HasIndependentDimensions,
        Rectangle,
        checks=(fresh_rectangle_has_no_area, fresh_rectangle_has_no_area),
    )
    assert len(seen) == 2
    assert seen[0] is not seen[1]


def test_verify_contract_requires_conforming_factory():
    """Test that the factory must build a conforming variant."""
    with pytest.raises(CapabilityBindingError):
        verify_contract(HasSide, Rectangle)


def test_verify_contract_uses_with_contract_checks():
    """Test that checks added through with_contract are run."""
    spec = capability_of(HasSide).with_contract(lambda square: False)

    with pytest.raises(CapabilityContractError, match="<lambda>"):
        verify_contract(spec, SquareTile)


def test_verify_contract_without_checks_passes():
    """Test verifying a capability that carries no checks."""
    spec = Capability.define("reading", ["read"])

    assert verify_contract(spec, Reader) is True


def test_declared_coupled_square_is_rejected_at_definition():
    """Test that declaring a rectangle whose sides are coupled fails when the class is defined."""
    registry = CapabilityRegistry()

    with pytest.raises(CapabilityContractError) as exc_info:

        @implements(HasIndependentDimensions, registry=registry)
        class DeclaredCoupledSquare(CoupledSquare):
            pass

    assert exc_info.value.check_name == "dimensions_are_independent"
    assert dict(registry.snapshot()) == {}


def test_implements_verifies_contracts_with_factory():
    """Test that a class needing constructor arguments is verified through factory."""
    registry = CapabilityRegistry()

    class SizedTile(SquareTile):
        def __init__(self, side: int) -> None:
            super().__init__(side)

    implements(HasSide, registry=registry, factory=lambda: SizedTile(1))(SizedTile)

    assert registry.get(SizedTile) == frozenset({"has_side"})

    class BrokenTile(SizedTile):
        def area(self) -> int:
            return 0

    with pytest.raises(CapabilityContractError, match="side_sets_both_dimensions"):
        implements(HasSide, registry=registry, factory=lambda: BrokenTile(1))(BrokenTile)


def test_implements_skips_contracts_without_factory(caplog: pytest.LogCaptureFixture):
    """Test that contract checks are skipped for classes that cannot be built without arguments."""
    registry = CapabilityRegistry()

    class StubbornSquare(CoupledSquare):
        def __init__(self, side: int) -> None:
            super().__init__()
            self.side = side

    with caplog.at_level(logging.DEBUG, logger="capability_dispatch.capabilities.conformance"):
        implements(HasIndependentDimensions, registry=registry)(StubbornSquare)

    assert registry.get(StubbornSquare) == frozenset({"independent_dimensions"})
    assert any(
        record.getMessage() == "contract checks skipped" for record in caplog.records
    )


def test_bundled_geometry_variants_pass_contracts_when_declared():
    """Test that the bundled rectangle and square tile survive definition-time contract checks."""
    registry = CapabilityRegistry()

    implements(HasIndependentDimensions, registry=registry)(Rectangle)
    implements(HasSide, registry=registry)(SquareTile)

    assert registry.get(Rectangle) == frozenset({"independent_dimensions"})
    assert registry.get(SquareTile) == frozenset({"has_side"})
