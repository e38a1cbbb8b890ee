"""
Price table used by the cost report.

Chat and audio prices are in USD per 1000 units (tokens or characters),
image prices are in USD per generated image.
"""

from decimal import Decimal
from typing import NamedTuple


class ChatModelPrice(NamedTuple):
    name: str
    input_price: Decimal
    output_price: Decimal


CHAT_MODEL_PRICES = [
    ChatModelPrice("GPT-4o Mini", Decimal("0.000150"), Decimal("0.000600")),
    ChatModelPrice("GPT-4o", Decimal("0.00250"), Decimal("0.01000")),
    ChatModelPrice("GPT-4 Turbo", Decimal("0.0100"), Decimal("0.03000")),
    ChatModelPrice("GPT-4", Decimal("0.0300"), Decimal("0.0600")),
]

# (column label, price per 1000 characters)
AUDIO_PRICES = [
    ("TTS", Decimal("0.015")),
    ("TTS-HD", Decimal("0.030")),
]

# (column label, price per image)
IMAGE_PRICES = [
    ("DALL-E-3 Standard", Decimal("0.040")),
    ("DALL-E-3 HD", Decimal("0.080")),
]


def cost_per_thousand(units: int, price: Decimal) -> Decimal:
    """Cost of `units` billed at `price` per 1000, rounded to cents."""
    return (Decimal(units) / 1000 * price).quantize(Decimal("0.01"))
