"""Tests for the per-node cohesion checks, including the end-to-end scenarios."""

from __future__ import annotations

from modcohesion.checks import visit
from modcohesion.config import CohesionConfig
from modcohesion.context import VisitContext
from modcohesion.nodes import (
    AssignNode,
    MethodCallExpr,
    NewNode,
    OpaqueExpr,
    ParamNode,
    ReturnNode,
    StaticCallExpr,
    UseClause,
    UseNode,
)
from modcohesion.violations import ViolationKind, ViolationRecord
from tests.helpers import make_code_base, make_context
from tests.helpers.constants import (
    BILLING_FACADE,
    BILLING_HANDLER_CLASS,
    BILLING_INVOICE,
    BILLING_NS,
    SHIPPING_DTO,
    SHIPPING_FACADE,
    SHIPPING_FACTORY,
    SHIPPING_ORDER,
    SHIPPING_PACKAGE,
    SHIPPING_SERVICE,
    VENDOR_CLASS,
)


def _use(*names: str) -> UseNode:
    return UseNode(tuple(UseClause(name) for name in names))


class TestScenarios:
    """Scenarios A-F: one module referencing another."""

    def test_a_import_from_other_module(self, billing_context: VisitContext) -> None:
        records = visit(_use(SHIPPING_SERVICE), billing_context)

        assert records == [
            ViolationRecord(
                kind=ViolationKind.IMPORT,
                current_module="Billing",
                current_class=BILLING_HANDLER_CLASS,
                symbol=SHIPPING_SERVICE,
                target_module="Shipping",
                target_namespace=SHIPPING_SERVICE,
            )
        ]

    def test_b_import_of_facade(self, billing_context: VisitContext) -> None:
        assert visit(_use(BILLING_FACADE), billing_context) == []

    def test_c_parameter_typed_by_other_module(self) -> None:
        context = make_context(
            namespace=BILLING_NS,
            class_fqsen=f"{BILLING_NS}\\InvoiceService",
            imports={"Order": SHIPPING_ORDER},
        )

        records = visit(ParamNode(name="order", type_name="Order"), context)

        assert len(records) == 1
        assert records[0].kind is ViolationKind.PARAMETER_TYPE
        assert records[0].symbol == "order"
        assert records[0].current_module == "Billing"
        assert records[0].target_module == "Shipping"
        assert records[0].current_class == f"{BILLING_NS}\\InvoiceService"

    def test_d_instantiation_of_other_module(self) -> None:
        context = make_context(namespace=BILLING_NS)

        records = visit(NewNode("\\App\\Modules\\Shipping\\Order"), context)

        assert len(records) == 1
        assert records[0].kind is ViolationKind.INSTANTIATION
        assert records[0].symbol == "\\App\\Modules\\Shipping\\Order"
        assert records[0].target_module == "Shipping"

    def test_e_assignment_with_return_type_expansion(self) -> None:
        context = make_context(
            namespace=BILLING_NS,
            imports={"SomeShippingClass": SHIPPING_FACTORY},
            code_base=make_code_base({(SHIPPING_FACTORY, "make"): (SHIPPING_PACKAGE,)}),
        )
        node = AssignNode(var_name="x", expr=StaticCallExpr("SomeShippingClass", "make"))

        records = visit(node, context)

        assert [r.kind for r in records] == [ViolationKind.ASSIGNMENT] * 2
        assert [r.target_namespace for r in records] == [SHIPPING_FACTORY, SHIPPING_PACKAGE]
        assert {r.target_module for r in records} == {"Shipping"}
        assert {r.symbol for r in records} == {"x"}

    def test_f_return_of_same_module(self) -> None:
        context = make_context(namespace=BILLING_NS)
        node = ReturnNode(NewNode("\\" + BILLING_INVOICE))

        assert visit(node, context) == []


class TestApplicability:
    """Only code inside a module is checked; irrelevant nodes are ignored."""

    def test_outside_module_hierarchy_not_checked(self) -> None:
        context = make_context(namespace="App\\Http\\Controllers", class_fqsen=None)

        assert visit(_use(SHIPPING_SERVICE), context) == []
        assert visit(NewNode("\\" + SHIPPING_ORDER), context) == []

    def test_marker_substring_context_has_no_module(self) -> None:
        context = make_context(namespace="App\\ModulesLegacy\\Foo", class_fqsen=None)

        records = visit(NewNode(SHIPPING_ORDER), context)

        assert [(r.current_module, r.target_module) for r in records] == [(None, "Shipping")]

    def test_irrelevant_node(self, billing_context: VisitContext) -> None:
        assert visit(OpaqueExpr("$x"), billing_context) == []
        assert visit(StaticCallExpr("\\" + SHIPPING_ORDER, "find"), billing_context) == []

    def test_custom_root_marker(self) -> None:
        config = CohesionConfig(root_marker="Domains")
        context = make_context(namespace="App\\Domains\\Billing")

        records = visit(NewNode("App\\Domains\\Shipping\\Order"), context, config)

        assert [r.target_module for r in records] == ["Shipping"]
        assert visit(NewNode(SHIPPING_ORDER), context, config) == []


class TestUse:
    """Imports are checked clause by clause."""

    def test_group_import_reports_each_offender(self, billing_context: VisitContext) -> None:
        node = _use(SHIPPING_SERVICE, BILLING_INVOICE, SHIPPING_ORDER, VENDOR_CLASS)

        records = visit(node, billing_context)

        assert [r.symbol for r in records] == [SHIPPING_SERVICE, SHIPPING_ORDER]

    def test_dto_import_allowed(self, billing_context: VisitContext) -> None:
        assert visit(_use(SHIPPING_DTO, SHIPPING_FACADE), billing_context) == []

    def test_malformed_clause(self, billing_context: VisitContext) -> None:
        assert visit(UseNode((UseClause(None),)), billing_context) == []


class TestParamAndNew:
    """Parameters and instantiations fall back to the literal token."""

    def test_untyped_param(self, billing_context: VisitContext) -> None:
        assert visit(ParamNode(name="value"), billing_context) == []

    def test_unimported_short_name_is_unowned(self, billing_context: VisitContext) -> None:
        assert visit(ParamNode(name="order", type_name="Order"), billing_context) == []

    def test_new_via_import(self) -> None:
        context = make_context(imports={"Order": SHIPPING_ORDER})

        records = visit(NewNode("Order"), context)

        assert [(r.symbol, r.target_namespace) for r in records] == [("Order", SHIPPING_ORDER)]

    def test_new_without_class(self, billing_context: VisitContext) -> None:
        assert visit(NewNode(), billing_context) == []


class TestAssign:
    """Assignments may report the primary target and each returned type."""

    def test_requires_variable(self) -> None:
        context = make_context(imports={"Order": SHIPPING_ORDER})

        assert visit(AssignNode(expr=NewNode("Order")), context) == []

    def test_chained_call(self) -> None:
        context = make_context(imports={"Order": SHIPPING_ORDER})
        node = AssignNode("orders", MethodCallExpr(StaticCallExpr("Order", "query"), "get"))

        records = visit(node, context)

        assert [r.target_namespace for r in records] == [SHIPPING_ORDER]

    def test_facade_returning_dto(self) -> None:
        context = make_context(
            imports={"ShippingFacade": SHIPPING_FACADE},
            code_base=make_code_base({(SHIPPING_FACADE, "parcel"): (SHIPPING_DTO,)}),
        )
        node = AssignNode("parcel", StaticCallExpr("ShippingFacade", "parcel"))

        assert visit(node, context) == []

    def test_facade_leaking_internal_type(self) -> None:
        context = make_context(
            imports={"ShippingFacade": SHIPPING_FACADE},
            code_base=make_code_base({(SHIPPING_FACADE, "order"): (SHIPPING_ORDER, "null")}),
        )
        node = AssignNode("order", StaticCallExpr("ShippingFacade", "order"))

        records = visit(node, context)

        assert [r.target_namespace for r in records] == [SHIPPING_ORDER]

    def test_unknown_method_still_checks_primary(self) -> None:
        context = make_context(imports={"SomeShippingClass": SHIPPING_FACTORY})
        node = AssignNode("x", StaticCallExpr("SomeShippingClass", "unknown"))

        records = visit(node, context)

        assert [r.target_namespace for r in records] == [SHIPPING_FACTORY]

    def test_opaque_rhs(self, billing_context: VisitContext) -> None:
        assert visit(AssignNode("x", OpaqueExpr("$y")), billing_context) == []


class TestReturn:
    """Returned class-scoped expressions are checked."""

    def test_return_other_module_via_import(self) -> None:
        context = make_context(imports={"Order": SHIPPING_ORDER})

        records = visit(ReturnNode(StaticCallExpr("Order", "find")), context)

        assert len(records) == 1
        assert records[0].kind is ViolationKind.RETURN
        assert records[0].symbol == SHIPPING_ORDER

    def test_bare_return(self, billing_context: VisitContext) -> None:
        assert visit(ReturnNode(), billing_context) == []

    def test_return_variable(self, billing_context: VisitContext) -> None:
        assert visit(ReturnNode(OpaqueExpr("$order")), billing_context) == []
