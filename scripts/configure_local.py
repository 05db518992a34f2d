#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

"""
Interactive local configurator harness (no HTTP, mock cart).

Usage:
  python3 scripts/configure_local.py [path/to/product.json]

Commands:
  w <width>     select a width (empty clears it)
  d <drop>      select a drop (empty clears it)
  q <quantity>  type a quantity
  + / -         step the quantity
  s             submit to the mock cart
  /quit
"""

import asyncio

from curtain_widget.application.use_cases.cart_count import CartCountAnimator
from curtain_widget.infrastructure.cart.mock_cart import MockCartService
from curtain_widget.infrastructure.catalog.catalog_loader import load_catalog
from curtain_widget.infrastructure.display.memory_display import MemoryDisplay
from curtain_widget.wiring.dependencies import build_widget


def _print_display(display: MemoryDisplay) -> None:
    snap = display.snapshot()
    diag = snap["diagnostics"]
    print("-" * 60)
    print(
        f"width={diag.get('width')} panels={diag.get('panels')} drop={diag.get('drop')} "
        f"variant={diag.get('variant')} unit={diag.get('price')}"
    )
    print(f"price={snap['price']} button={snap['button_price']!r} submit_enabled={snap['submit_enabled']}")
    print(f"cart_count={snap['cart_count']} drawer_open={snap['drawer_open']}")
    while display.alerts:
        print(f"ALERT: {display.alerts.pop(0)}")


async def _loop(catalog_path: str) -> None:
    display = MemoryDisplay()
    animator = CartCountAnimator(display)
    widget = build_widget(
        "local",
        catalog=load_catalog(catalog_path),
        cart=MockCartService(),
        display=display,
        animator=animator,
    )
    print("\nLocal Curtain Configurator")
    print("Commands: w <width>, d <drop>, q <qty>, +, -, s, /quit")
    _print_display(display)

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return
        cmd, _, arg = line.strip().partition(" ")
        if cmd == "/quit":
            return
        if cmd == "w":
            widget.on_width_change(arg)
        elif cmd == "d":
            widget.on_drop_change(arg)
        elif cmd == "q":
            widget.on_quantity_change(arg)
        elif cmd == "+":
            widget.on_quantity_step(1)
        elif cmd == "-":
            widget.on_quantity_step(-1)
        elif cmd == "s":
            result = await widget.on_submit()
            await animator.wait()
            print(f"submitted ok={result.ok} error={result.error}")
        else:
            print("Unknown command")
            continue
        _print_display(display)


def main() -> None:
    catalog_path = sys.argv[1] if len(sys.argv) > 1 else str(ROOT / "data" / "product.json")
    asyncio.run(_loop(catalog_path))


if __name__ == "__main__":
    main()
