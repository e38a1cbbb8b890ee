"""
Cost report rendering.

Builds the chat, audio and image cost tables shown to the operator at the
end of a successful run.
"""

from decimal import Decimal
from typing import List

from rich import box
from rich.console import Console
from rich.table import Table

from .pricing import (
    AUDIO_PRICES,
    CHAT_MODEL_PRICES,
    IMAGE_PRICES,
    cost_per_thousand,
)
from .tracker import UsageCounters


def format_cost(cost: Decimal) -> str:
    return f"${cost:.2f}"


def format_number(number: int) -> str:
    return f"{number:,}"


def _styled_table(title: str, columns: List[str]) -> Table:
    table = Table(
        title=f"[bold underline blue]{title}[/]",
        box=box.ROUNDED,
        expand=True,
    )
    table.add_column("Category", justify="center")
    table.add_column("Count", justify="center")
    for column in columns:
        table.add_column(column, justify="left")
    return table


def build_chat_table(counters: UsageCounters) -> Table:
    table = _styled_table("Chat Costs", [price.name for price in CHAT_MODEL_PRICES])
    table.add_row(
        "Chat Input",
        f"[yellow]{format_number(counters.chat_input_tokens)}[/]",
        *[
            format_cost(cost_per_thousand(counters.chat_input_tokens, p.input_price))
            for p in CHAT_MODEL_PRICES
        ],
    )
    table.add_row(
        "Chat Output",
        f"[yellow]{format_number(counters.chat_output_tokens)}[/]",
        *[
            format_cost(cost_per_thousand(counters.chat_output_tokens, p.output_price))
            for p in CHAT_MODEL_PRICES
        ],
    )
    return table


def build_audio_table(counters: UsageCounters) -> Table:
    table = _styled_table("Audio Costs", [label for label, _ in AUDIO_PRICES])
    table.add_row(
        "Audio",
        f"[yellow]{format_number(counters.audio_characters)}[/]",
        *[
            format_cost(cost_per_thousand(counters.audio_characters, price))
            for _, price in AUDIO_PRICES
        ],
    )
    return table


def build_image_table(image_generated: bool) -> Table:
    table = _styled_table("Image Costs", [label for label, _ in IMAGE_PRICES])
    table.add_row(
        "Image",
        f"[yellow]{1 if image_generated else 0}[/]",
        *[
            format_cost(price if image_generated else Decimal("0"))
            for _, price in IMAGE_PRICES
        ],
    )
    return table


def render_cost_report(
    console: Console, counters: UsageCounters, image_generated: bool
) -> None:
    """
    Print the three cost tables.

    Args:
        console: Rich console to print to
        counters: Usage accumulated during the run
        image_generated: Whether the run produced a cover image
    """
    console.print()
    console.print()
    console.print(build_chat_table(counters))
    console.print()
    console.print(build_audio_table(counters))
    console.print()
    console.print(build_image_table(image_generated))
    console.print()
