"""
Load tweets from a JSON file into the database.

The file holds a JSON array of objects with tweet_id, text, author and
timestamp fields. Tweets that are already stored are skipped.

Run with: python load_tweets.py sample_tweets.json
"""

import json
import sys

from feedback_analyzer.database import SessionLocal, init_db
from feedback_analyzer.services.ingest import store_tweets


def main():
    if len(sys.argv) != 2:
        print("Usage: python load_tweets.py <tweets.json>")
        sys.exit(1)

    with open(sys.argv[1], encoding="utf-8") as f:
        tweets = json.load(f)

    init_db()
    db = SessionLocal()
    try:
        new_count = store_tweets(db, tweets)
    finally:
        db.close()

    print(f"✅ Loaded {new_count} new tweets ({len(tweets)} in file)")


if __name__ == "__main__":
    main()
