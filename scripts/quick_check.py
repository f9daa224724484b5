"""
quick_check.py — One-shot sanity check against a running backend.

Posts every named farm scenario to the advisory report endpoint and
prints the headline numbers.

Usage:
    uvicorn krishimitra.main:app --reload
    python scripts/quick_check.py
"""

import os
import sys

import requests

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from tests.scenarios import SCENARIOS, get_parameters  # noqa: E402

BASE_URL = os.environ.get("KRISHIMITRA_URL", "http://localhost:8000")

GREEN = "\033[92m"
RED   = "\033[91m"
BOLD  = "\033[1m"
RESET = "\033[0m"


def main():
    print(f"\n{BOLD}Quick check: one advisory report per scenario{RESET}\n")

    # 1. Check health endpoint
    try:
        h = requests.get(f"{BASE_URL}/api/health", timeout=5)
        h.raise_for_status()
        print(f"  Backend   {GREEN}OK{RESET}  (version={h.json().get('version')})\n")
    except requests.RequestException as e:
        print(f"  Backend   {RED}UNREACHABLE{RESET}: {e}")
        print("\n  Start the backend first:  uvicorn krishimitra.main:app --reload")
        sys.exit(1)

    # 2. POST each scenario
    all_ok = True
    for key, scenario in SCENARIOS.items():
        try:
            resp = requests.post(f"{BASE_URL}/api/advisory/report", json=get_parameters(key), timeout=10)
        except requests.RequestException as e:
            print(f"  {RED}✗{RESET}  {scenario['label']:<14} ERROR: {e}")
            all_ok = False
            continue

        if resp.status_code != 200:
            print(f"  {RED}✗{RESET}  {scenario['label']:<14} HTTP {resp.status_code}  {resp.text[:80]}")
            all_ok = False
            continue

        report = resp.json()
        prediction = report["yield_prediction"]
        costs = report["costs"]
        water = report.get("water") or {}
        print(
            f"  {GREEN}✓{RESET}  {scenario['label']:<14} "
            f"yield {prediction['estimated_yield']:>6} t/ha ({prediction['yield_category']:<6})  "
            f"cost {costs['total_cost']:>8}  margin {costs['profit_margin']:>6}%  "
            f"water stress {water.get('water_stress_risk', '-')}"
        )

    print()
    if all_ok:
        print(f"  {GREEN}{BOLD}All checks passed.{RESET}\n")
    else:
        print(f"  {RED}Some scenarios failed. Check the backend logs.{RESET}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
