"""
Portfolio aggregation.

The portfolio of an application is the flattened collection of funds
across all of its products. The portfolio total is the tax-adjusted,
net-of-fee value of every fund in that collection.

Arithmetic is exact ``Decimal`` arithmetic. No rounding is applied here;
presentation rounding belongs to the templates.
"""

from decimal import Decimal
from typing import List, Union

from statusdoc.app.schemas.application import Application, Fund


def get_portfolio_funds(application: Application) -> List[Fund]:
    """Return every fund of every product, in product order."""
    return [
        fund
        for product in application.products
        for fund in product.funds
    ]


def compute_portfolio_total(
    application: Application,
    tax_rate: Union[Decimal, int, str],
) -> Decimal:
    """
    Compute the tax-adjusted, net-of-fee portfolio value.

    Each fund contributes ``(amount - fees) * tax_rate``. An application
    without products or funds totals ``Decimal("0")``.
    """
    rate = Decimal(tax_rate)

    return sum(
        (
            (fund.amount - fund.fees) * rate
            for fund in get_portfolio_funds(application)
        ),
        Decimal("0"),
    )
