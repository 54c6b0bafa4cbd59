import argparse
import json
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.candidates import get_candidate_pool
from app.config import MIN_COMPATIBLE_POOL
from app.options import GENDER_IDENTITY_OPTIONS, INTERESTED_IN_OPTIONS
from app.schemas import Candidate
from app.services.compatibility import compatible_pool, filter_compatible
from app.services.matching import FallbackMatcher


class _Requester:
    def __init__(self, gender_identity: str, interested_in: list[str], values: list[str]) -> None:
        self.gender_identity = gender_identity
        self.interested_in = interested_in
        self.values = values


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the deterministic fallback gatherings for a requester")
    parser.add_argument("--gender-identity", choices=GENDER_IDENTITY_OPTIONS, default="Woman")
    parser.add_argument("--interested-in", choices=INTERESTED_IN_OPTIONS, action="append")
    parser.add_argument("--value", action="append", default=[])
    parser.add_argument("--shape", choices=["single", "multi"], default="multi")
    parser.add_argument("--minimum", type=int, default=MIN_COMPATIBLE_POOL)
    args = parser.parse_args()

    requester = _Requester(args.gender_identity, args.interested_in or ["All genders"], args.value)
    pool: tuple[Candidate, ...] = get_candidate_pool()
    compatible = filter_compatible(requester, pool)
    used = compatible_pool(requester, pool, minimum=args.minimum)

    print(f"pool={len(pool)} compatible={len(compatible)} used={len(used)} full_pool_fallback={len(compatible) < args.minimum}")
    result = FallbackMatcher(minimum=args.minimum).match(requester, pool, args.shape)
    print(json.dumps(result.model_dump(by_alias=True), indent=2))


if __name__ == "__main__":
    main()
