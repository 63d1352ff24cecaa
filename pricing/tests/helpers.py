from cart_schema import (
    CategoryPercentageDiscount,
    FixedAmountCoupon,
    LineItem,
    PercentageCoupon,
    PointsDiscount,
    SeasonalDiscount,
)

def make_item(price=100, category="Clothing", quantity=1, name="Test Item"):
    return LineItem(name=name, price=price, category=category, quantity=quantity)

def fixed_coupon(amount):
    return FixedAmountCoupon(amount=amount)

def percentage_coupon(percentage):
    return PercentageCoupon(percentage=percentage)

def category_discount(target_category, percentage):
    return CategoryPercentageDiscount(target_category=target_category, percentage=percentage)

def points_discount(customer_points):
    return PointsDiscount(customer_points=customer_points)

def seasonal_discount(every_x_thb, discount_y_thb):
    return SeasonalDiscount(every_x_thb=every_x_thb, discount_y_thb=discount_y_thb)
