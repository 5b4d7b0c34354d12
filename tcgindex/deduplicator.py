"""
TCGINDEX card de-duplication
"""
import logging
from typing import Any, Dict, List, Optional, Set, Tuple

LOGGER = logging.getLogger(__name__)


def get_card_id(card: Any) -> Optional[str]:
    """
    Pull the id off a raw card, if it has a usable one
    :param card: Raw card entry
    :return Card id or None
    """
    if not isinstance(card, dict):
        return None

    card_id = card.get("id")
    return card_id if isinstance(card_id, str) else None


def deduplicate_cards(
    cards: List[Dict[str, Any]],
) -> Tuple[List[Dict[str, Any]], Set[str]]:
    """
    Drop every card whose id was already seen, keeping the first
    occurrence and the original order. Only the id is compared.
    Entries without a usable id are passed through for the record
    builder to reject.
    :param cards: Raw cards, in catalog order
    :return Unique cards, and the ids that repeated
    """
    seen_ids: Set[str] = set()
    duplicate_ids: Set[str] = set()
    duplicate_order: List[str] = []
    unique_cards: List[Dict[str, Any]] = []

    for card in cards:
        card_id = get_card_id(card)
        if card_id is None:
            unique_cards.append(card)
            continue

        if card_id in seen_ids:
            if card_id not in duplicate_ids:
                duplicate_ids.add(card_id)
                duplicate_order.append(card_id)
            continue

        seen_ids.add(card_id)
        unique_cards.append(card)

    if duplicate_ids:
        LOGGER.warning(
            f"Found {len(duplicate_ids)} duplicate card IDs, later copies skipped: "
            f"{', '.join(duplicate_order)}"
        )

    LOGGER.info(f"After de-duplication: {len(unique_cards)} unique cards remain")
    return unique_cards, duplicate_ids
