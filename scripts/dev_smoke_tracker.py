# dev_smoke_tracker.py
# -- live check against tracker.gg; needs TRN_API_KEY in .env

import asyncio

from trackergg import Tracker, TrackerError
from trackergg.config import setup_logging

CASES = [
    ("apex", "origin", "shroud"),
    ("csgo", "steam", "76561197960287930"),
    ("splitgate", "steam", "76561197960287930"),
    ("div2", "uplay", "this-player-should-not-exist-42"),
]


async def main():
    setup_logging()
    tracker = Tracker.from_env()

    print("--- profile cases ---")
    for i, (game, platform, user) in enumerate(CASES, 1):
        try:
            profile = await tracker.get_profile(game, platform, user)
        except TrackerError as e:
            print(f"case {i}: {game} {platform}/{user} -> {e.kind}: {e}")
            continue
        data = profile["data"]
        print(f"case {i}: {game} {platform}/{user} -> {len(data['segments'] or [])} segment(s)")
        print("  userInfo:", data["userInfo"])

    print("\n--- concurrent case ---")
    results = await asyncio.gather(
        *(tracker.get_profile(g, p, u) for g, p, u in CASES[:2]),
        return_exceptions=True,
    )
    for (game, _, _), r in zip(CASES, results):
        print(f"{game}:", type(r).__name__ if isinstance(r, Exception) else r["data"]["platformInfo"])


if __name__ == "__main__":
    asyncio.run(main())
