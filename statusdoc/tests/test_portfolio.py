from decimal import Decimal

from statusdoc.app.schemas.application import Fund, Product
from statusdoc.app.services.portfolio import (
    compute_portfolio_total,
    get_portfolio_funds,
)
from statusdoc.tests.fixtures.applications import make_application


def test_total_is_sum_of_tax_adjusted_net_values():
    application = make_application()

    total = compute_portfolio_total(application, Decimal("0.1"))

    # (100 - 10) * 0.1 + (50 - 5) * 0.1
    assert total == Decimal("13.5")


def test_total_is_zero_without_products():
    application = make_application(products=[])

    assert compute_portfolio_total(application, Decimal("0.15")) == Decimal("0")


def test_total_is_zero_for_products_without_funds():
    application = make_application(products=[Product(name="Empty")])

    assert compute_portfolio_total(application, Decimal("0.15")) == 0


def test_total_keeps_exact_decimal_precision():
    application = make_application(
        products=[
            Product(
                funds=[
                    Fund(amount=Decimal("0.10"), fees=Decimal("0.00")),
                    Fund(amount=Decimal("0.20"), fees=Decimal("0.00")),
                ]
            )
        ]
    )

    total = compute_portfolio_total(application, Decimal("1"))

    assert total == Decimal("0.30")
    assert str(total) == "0.30"


def test_total_accepts_string_rate():
    application = make_application()

    assert compute_portfolio_total(application, "0.1") == Decimal("13.5")


def test_portfolio_funds_are_flattened_across_every_product():
    application = make_application(
        products=[
            Product(funds=[Fund(name="A", amount=1), Fund(name="B", amount=2)]),
            Product(funds=[]),
            Product(funds=[Fund(name="C", amount=3)]),
        ]
    )

    funds = get_portfolio_funds(application)

    assert [fund.name for fund in funds] == ["A", "B", "C"]
