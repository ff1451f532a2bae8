#!/usr/bin/env python3

import argparse
import logging
from dotenv import load_dotenv
from vibeswipe.database import db_session
from vibeswipe.services.feed import FeedService

logger = logging.getLogger(__name__)


def preview_feed(
    city: str,
    user_id: int = None,
    feed_type: str = 'all',
    category: str = None,
    limit: int = 20,
    session_factory=None
):
    """Log the ranked feed with per-component score breakdowns"""
    with db_session(session_factory) as db:
        result = FeedService(db).build_feed(
            city=city,
            user_id=user_id,
            feed_type=feed_type,
            category=category
        )
    if result.message:
        logger.info(result.message)
        return result

    logger.info(f"=== Feed for {result.city}: {result.count} cards ===")
    for rank, card in enumerate(result.feed[:limit], 1):
        name = card.attributes.get('name') or card.attributes.get('title')
        logger.info(f"{rank:>2}. [{card.card_type}] {name} - {card.match_score} ({card.match_label})")
        logger.info(f"    {card.score_breakdown}")
    return result


def main():
    # Load environment variables from .env file
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = argparse.ArgumentParser(description="Preview the scored swipe feed for a city")
    parser.add_argument("--city", required=True, help="City to build the feed for")
    parser.add_argument("--user-id", type=int, default=None, help="Apply this user's preferences and swipes")
    parser.add_argument("--type", dest="feed_type", default="all", choices=["venues", "events", "all"])
    parser.add_argument("--category", default=None, help="Event category filter")
    parser.add_argument("--limit", type=int, default=20, help="Number of cards to show (default: 20)")

    args = parser.parse_args()
    preview_feed(args.city, args.user_id, args.feed_type, args.category, args.limit)


if __name__ == "__main__":
    main()
