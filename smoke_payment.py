#!/usr/bin/env python3
"""
Smoke test for a running VNPay gateway service.

Usage:
    python smoke_payment.py 100000 "Thanh toan don hang"
"""
import requests
import sys
from urllib.parse import parse_qsl, urlsplit

BASE_URL = "http://localhost:8000"


def smoke_create_payment(amount: int, order_info: str):
    """Create a payment URL and print its fields."""

    url = f"{BASE_URL}/api/payments/vnpay/url"
    body = {
        "amount": amount,
        "order_info": order_info,
        "expire_in_minutes": 15
    }

    print(f"📨 Creating payment: {amount} VND - {order_info}")
    print(f"🔗 Connecting to: {url}")
    print("=" * 70)

    try:
        response = requests.post(url, json=body, timeout=10)

        if response.status_code != 200:
            print(f"❌ Error: HTTP {response.status_code}")
            print(response.text)
            return

        data = response.json()
        payment_url = data["payment_url"]

        print(f"   ✅ txn_ref: {data['txn_ref']}")
        for key, value in parse_qsl(urlsplit(payment_url).query):
            print(f"      {key} = {value}")

        print("\n" + "=" * 70)
        print("Open in a browser to pay on the sandbox:")
        print(payment_url)

    except requests.exceptions.Timeout:
        print("❌ Timeout - server took too long to respond")
    except requests.exceptions.ConnectionError:
        print("❌ Connection error - is the server running?")


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python smoke_payment.py <amount> \"Order info\"")
        print("\nExample:")
        print('  python smoke_payment.py 100000 "Thanh toan don hang"')
        sys.exit(1)

    smoke_create_payment(int(sys.argv[1]), " ".join(sys.argv[2:]))
