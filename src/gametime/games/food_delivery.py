"""Food delivery game definition.

Each action carries two outcomes, ``[worse, better]``. Negative values are
costs or regret, positive values are benefits, and larger magnitudes mean
stronger outcomes.
"""

from ..models import build_game

GAME = build_game(
    id="foodDelivery",
    name="Food Delivery",
    description="Choices around ordering food versus cooking, from impulse "
                "control in the moment up to monthly subscription management.",
    timeframes=[
        # impulse control: order immediately or wait and reconsider
        ("minute", ["Order Now", "Delay 10min"], [[-3, -1], [1, 2]]),
        # meal planning: convenience versus health and cost
        ("day", ["Order Takeout", "Cook Meal"], [[-5, -2], [3, 5]]),
        # subscription management
        ("month", ["Subscribe to Service", "Cancel Subscriptions"], [[-30, -10], [50, 100]]),
    ],
)
