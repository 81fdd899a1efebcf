"""
Hero Bitmask Codec.

Bit ``i`` of a mask selects ``HERO_NAMES[i]``. The API stores the mask as
a decimal string; the CLI accepts names, a numeric mask, or "all".
"""

from collections.abc import Iterable

from hs_order.core.constants import HERO_ALL_ALIASES, HERO_NAMES, MAX_HERO_MASK
from hs_order.core.exceptions import HeroMaskError, UnknownHeroError

_U32_MAX = 0xFFFFFFFF


def _parse_u32(s: str) -> int | None:
    """Parse an unsigned 32-bit decimal string; None when it is not one."""
    text = s[1:] if s.startswith("+") else s
    if not text.isascii() or not text.isdigit():
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def _is_all(item: str) -> bool:
    return item.lower() in HERO_ALL_ALIASES


def decode_hero_mask(mask: str) -> list[str]:
    """Return the hero names selected by a mask string, in table order."""
    value = _parse_u32(mask) or 0
    return [name for i, name in enumerate(HERO_NAMES) if value & (1 << i)]


def hero_bit(name: str) -> int:
    """Return the mask bit of a hero name."""
    try:
        return 1 << HERO_NAMES.index(name)
    except ValueError:
        raise UnknownHeroError(f"未知英雄名称: {name}") from None


def validate_hero_item(item: str) -> str:
    """
    Check one CLI hero item and return it unchanged.

    Raises:
        HeroMaskError: Numeric mask outside 1..MAX_HERO_MASK
        UnknownHeroError: Not "all", a mask, or a known hero name
    """
    if _is_all(item):
        return item

    mask = _parse_u32(item)
    if mask is not None:
        if mask == 0 or mask > MAX_HERO_MASK:
            raise HeroMaskError(f"英雄掩码超出范围(1-{MAX_HERO_MASK}): {mask}")
        return item

    hero_bit(item)
    return item


def encode_hero_selection(items: Iterable[str]) -> int:
    """
    Combine validated hero items into one mask.

    A lone "all" or numeric item is used as-is. Otherwise the named heroes
    are OR-ed together, and any "all" among them selects every hero.
    """
    items = list(items)
    mask = 0

    if len(items) == 1:
        if _is_all(items[0]):
            mask = MAX_HERO_MASK
        else:
            mask = _parse_u32(items[0]) or 0

    if mask == 0:
        for item in items:
            if item in HERO_NAMES:
                mask |= hero_bit(item)
            elif _is_all(item):
                mask = MAX_HERO_MASK

    return mask


def describe_hero_mask(mask: int) -> str:
    """Render a mask for display: "全部" for every hero, else the names."""
    if mask == MAX_HERO_MASK:
        return "全部"
    return ", ".join(decode_hero_mask(str(mask)))
