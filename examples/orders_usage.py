"""Example usage of the orders and shipments APIs.

Requires MOLLIE_API_KEY (or MOLLIE_ACCESS_TOKEN) in the environment.
"""

import asyncio

from mollie_client import ApiRequestError, configure_logging, create_mollie_client
from mollie_client.config import settings


async def example_create_order(mollie):
    """Example: Create an order with one physical line."""
    print("\n=== Example 1: Create Order ===\n")

    order = await mollie.orders.create(
        amount={"value": "399.00", "currency": "EUR"},
        order_number="1337",
        locale="nl_NL",
        redirect_url="https://webshop.example.org/order/1337/",
        billing_address={
            "given_name": "Piet",
            "family_name": "Mondriaan",
            "email": "piet@mondriaan.com",
            "street_and_number": "Keizersgracht 126",
            "postal_code": "1015 CW",
            "city": "Amsterdam",
            "country": "NL",
        },
        lines=[
            {
                "type": "physical",
                "name": "LEGO 42083 Bugatti Chiron",
                "quantity": 1,
                "unit_price": {"value": "399.00", "currency": "EUR"},
                "total_amount": {"value": "399.00", "currency": "EUR"},
                "vat_rate": "21.00",
                "vat_amount": {"value": "69.25", "currency": "EUR"},
            }
        ],
        embed="payments",
    )

    print(f"Order {order.id} created, status {order.status}")
    print(f"Checkout: {order.get_checkout_url()}")
    return order


async def example_ship_order(mollie, order_id):
    """Example: Ship every remaining line and list the shipments."""
    print("\n=== Example 2: Shipments ===\n")

    try:
        shipment = await mollie.order_shipments.create(
            order_id=order_id,
            lines=[],
            tracking={
                "carrier": "PostNL",
                "code": "3SKABA000000000",
                "url": "http://postnl.nl/tracktrace/?B=3SKABA000000000&P=1016EE&D=NL&T=C",
            },
        )
        print(f"Shipment {shipment.id}, tracking: {shipment.get_tracking_url()}")
    except ApiRequestError as e:
        # Unpaid orders cannot be shipped
        print(f"Could not ship: {e}")

    shipments = await mollie.order_shipments.list(order_id=order_id)
    for shipment in shipments:
        order = await shipment.get_order()
        print(f"{shipment.id} belongs to order {order.id} ({order.status})")


async def main():
    """Run all examples."""
    configure_logging(settings.logging.level, settings.logging.json_output)

    async with create_mollie_client() as mollie:
        order = await example_create_order(mollie)
        await example_ship_order(mollie, order.id)


if __name__ == "__main__":
    asyncio.run(main())
