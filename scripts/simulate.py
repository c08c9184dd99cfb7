"""
Load Simulation Script

Drives a running GrubDash API with concurrent dish and order traffic:
creates, reads, status updates and deletes, then checks the
collections for duplicate ids.
Run from project root: python scripts/simulate.py

Version: 1.0.0
"""

import asyncio
import sys
import random
import time
import argparse
from collections import Counter
from typing import Any

import httpx

# Configuration
API_BASE_URL = "http://localhost:5000"
TOTAL_ORDERS = 50

# Sample data for random dishes and orders
DISH_NAMES = [
    "Pizza Margherita", "Pepperoni Pizza", "Caesar Salad", "Garlic Bread",
    "Pasta Carbonara", "Tiramisu", "Falafel Wrap", "Mulligatawny Soup",
]
STREETS = ["Main St", "Broadway", "5th Avenue", "Park Ave", "Madison Ave", "Lexington Ave"]
STATUSES = ["pending", "preparing", "out-for-delivery", "delivered"]


def generate_dish_payload() -> dict[str, Any]:
    """Generate a valid dish body."""
    name = random.choice(DISH_NAMES)
    return {
        "data": {
            "name": name,
            "description": f"House {name.lower()}",
            "price": random.randint(3, 30),
            "image_url": f"https://images.example.com/{name.lower().replace(' ', '-')}.jpg",
        }
    }


def generate_order_payload(dishes: list[dict[str, Any]]) -> dict[str, Any]:
    """Generate a valid order body referencing existing dishes."""
    lines = [
        {**dish, "quantity": random.randint(1, 3)}
        for dish in random.sample(dishes, k=random.randint(1, min(3, len(dishes))))
    ]
    return {
        "data": {
            "deliverTo": f"{random.randint(1, 999)} {random.choice(STREETS)}",
            "mobileNumber": f"555-{random.randint(100, 999)}-{random.randint(1000, 9999)}",
            "dishes": lines,
        }
    }


# =============================================================================
# ORDER LIFECYCLE
# =============================================================================

async def run_order_lifecycle(
    client: httpx.AsyncClient,
    order_num: int,
    dishes: list[dict[str, Any]],
) -> dict[str, Any]:
    """Create an order, move it to a random status, then try to delete it."""
    start_time = time.time()

    try:
        response = await client.post("/orders", json=generate_order_payload(dishes))
        if response.status_code != 201:
            return {
                "order_num": order_num,
                "success": False,
                "error": response.text[:100],
                "time": round(time.time() - start_time, 3),
            }
        order = response.json()["data"]

        new_status = random.choice(STATUSES)
        response = await client.put(
            f"/orders/{order['id']}",
            json={"data": {**order, "status": new_status}},
        )
        if response.status_code != 200:
            return {
                "order_num": order_num,
                "success": False,
                "error": response.text[:100],
                "time": round(time.time() - start_time, 3),
            }

        response = await client.delete(f"/orders/{order['id']}")
        expected = 204 if new_status == "pending" else 400

        return {
            "order_num": order_num,
            "success": response.status_code == expected,
            "order_id": order["id"],
            "status": new_status,
            "deleted": response.status_code == 204,
            "error": None if response.status_code == expected else response.text[:100],
            "time": round(time.time() - start_time, 3),
        }
    except httpx.HTTPError as e:
        return {
            "order_num": order_num,
            "success": False,
            "error": str(e)[:100],
            "time": round(time.time() - start_time, 3),
        }


async def run_simulation(total_orders: int = TOTAL_ORDERS) -> bool:
    """Run the concurrent simulation and print a summary."""
    print("=" * 70)
    print("🍽️  GRUBDASH LOAD SIMULATION")
    print("=" * 70)
    print(f"   Target: {API_BASE_URL}")
    print(f"   Orders: {total_orders}")

    async with httpx.AsyncClient(base_url=API_BASE_URL, timeout=30.0) as client:
        dish_responses = await asyncio.gather(
            *[client.post("/dishes", json=generate_dish_payload()) for _ in range(5)]
        )
        dishes = [r.json()["data"] for r in dish_responses if r.status_code == 201]
        if not dishes:
            print("\n❌ Could not create any dishes")
            return False

        start_time = time.time()
        results = await asyncio.gather(
            *[run_order_lifecycle(client, i, dishes) for i in range(total_orders)]
        )
        elapsed = round(time.time() - start_time, 2)

        remaining = (await client.get("/orders")).json()["data"]
        all_dishes = (await client.get("/dishes")).json()["data"]

    successes = [r for r in results if r["success"]]
    failures = [r for r in results if not r["success"]]
    deleted = [r for r in successes if r.get("deleted")]
    statuses = Counter(r["status"] for r in successes)

    print(f"\n📊 RESULTS ({elapsed}s):")
    print(f"   Succeeded: {len(successes)}/{total_orders}")
    print(f"   Deleted (pending): {len(deleted)}")
    for status, count in sorted(statuses.items()):
        print(f"   {status:<18} {count}")

    for failure in failures[:5]:
        print(f"   ⚠️ Order {failure['order_num']}: {failure['error']}")

    order_ids = [o["id"] for o in remaining]
    dish_ids = [d["id"] for d in all_dishes]
    duplicates = (len(order_ids) - len(set(order_ids))) + (len(dish_ids) - len(set(dish_ids)))
    if duplicates:
        print(f"\n⚠️ {duplicates} duplicate ids found!")
    else:
        print("\n✅ No duplicate ids")

    print("=" * 70)
    return not failures and not duplicates


# =============================================================================
# PRE-FLIGHT CHECKS
# =============================================================================

async def test_single_flows() -> bool:
    """Check each route and error case once before the load run."""
    print("=" * 70)
    print("🧪 PRE-FLIGHT CHECKS")
    print("=" * 70)

    checks = []

    async with httpx.AsyncClient(base_url=API_BASE_URL, timeout=10.0) as client:
        try:
            response = await client.get("/health")
        except httpx.HTTPError as e:
            print(f"\n❌ Cannot reach API: {e}")
            return False
        checks.append(("Health", response.status_code == 200))

        response = await client.post("/dishes", json=generate_dish_payload())
        checks.append(("Create dish", response.status_code == 201))
        dish = response.json().get("data", {})

        response = await client.post(
            "/dishes", json={"data": {**generate_dish_payload()["data"], "price": -1}}
        )
        checks.append(("Reject negative price", response.status_code == 400))

        response = await client.get("/dishes/unknown-id")
        checks.append(("Unknown dish is 404", response.status_code == 404))

        response = await client.request("PATCH", "/dishes")
        checks.append(("PATCH /dishes is 405", response.status_code == 405))

        response = await client.post("/orders", json=generate_order_payload([dish]))
        checks.append(("Create order", response.status_code == 201))
        order = response.json().get("data", {})

        response = await client.put(
            f"/orders/{order.get('id')}",
            json={"data": {**order, "status": "delivered"}},
        )
        checks.append(("Mark delivered", response.status_code == 200))

        response = await client.delete(f"/orders/{order.get('id')}")
        checks.append(("Delivered order not deletable", response.status_code == 400))

    for name, passed in checks:
        print(f"   {'✅' if passed else '❌'} {name}")

    print("=" * 70)
    return all(passed for _, passed in checks)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="GrubDash Load Simulation")
    parser.add_argument("--orders", type=int, default=TOTAL_ORDERS, help="Number of orders")
    parser.add_argument("--url", default=API_BASE_URL, help="API base URL")
    parser.add_argument("--skip-tests", action="store_true", help="Skip pre-flight checks")
    args = parser.parse_args()

    API_BASE_URL = args.url

    if not args.skip_tests:
        if not asyncio.run(test_single_flows()):
            print("\n❌ Pre-flight checks failed. Fix issues before running simulation.")
            sys.exit(1)
        print("\n✅ Pre-flight checks passed!")

    ok = asyncio.run(run_simulation(args.orders))
    sys.exit(0 if ok else 1)
