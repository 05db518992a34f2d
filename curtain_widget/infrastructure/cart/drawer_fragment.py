from __future__ import annotations

from bs4 import BeautifulSoup

DRAWER_TAG = "cart-drawer"


def extract_drawer(html: str) -> str | None:
    """Pull the single <cart-drawer> element out of a rendered section."""
    soup = BeautifulSoup(html or "", "html.parser")
    drawer = soup.find(DRAWER_TAG)
    if drawer is None:
        return None
    return str(drawer)


def mark_drawer_open(markup: str) -> str:
    soup = BeautifulSoup(markup, "html.parser")
    drawer = soup.find(DRAWER_TAG)
    if drawer is None:
        return markup
    classes = drawer.get("class") or []
    if "active" not in classes:
        classes.append("active")
    drawer["class"] = classes
    drawer["open"] = ""
    return str(drawer)


def is_drawer_open(markup: str | None) -> bool:
    if not markup:
        return False
    drawer = BeautifulSoup(markup, "html.parser").find(DRAWER_TAG)
    if drawer is None:
        return False
    return "active" in (drawer.get("class") or []) and drawer.has_attr("open")
