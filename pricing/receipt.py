import json
from typing import List, Optional, Sequence

from cart_schema import DiscountResult, LineItem


def _format_table(rows: List[List[str]]) -> str:
    # Left-aligned label column, right-aligned amount column
    label_width = max(len(r[0]) for r in rows)
    amount_width = max(len(r[1]) for r in rows)
    return "\n".join(f"{label.ljust(label_width)}  {amount.rjust(amount_width)}" for label, amount in rows)


def render_receipt(result: DiscountResult, items: Optional[Sequence[LineItem]] = None) -> str:
    """
    Renders a discount result as a plain-text summary.

    Every campaign category gets a line, so a category with no campaign
    shows a 0.00 discount rather than being left out.
    """
    rows: List[List[str]] = []
    for item in items or []:
        rows.append([f"{item.name} x{item.quantity}", f"{item.price * item.quantity:.2f}"])

    rows.append(["Original total", f"{result.original_total:.2f}"])
    for applied in result.applied_campaigns:
        rows.append([f"  {applied.category.value} discount", f"-{applied.discount_amount:.2f}"])
    rows.append(["Total discount", f"-{result.total_discount:.2f}"])
    rows.append(["Final total", f"{result.final_total:.2f}"])

    return _format_table(rows)


def render_json(result: DiscountResult) -> str:
    return json.dumps(result.model_dump(mode="json", by_alias=True), indent=2)
