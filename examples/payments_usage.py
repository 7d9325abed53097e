"""Example usage of the payments, refunds and pagination APIs.

Set MOLLIE_API_KEY (a test_ key) in the environment or in .env before
running:

    MOLLIE_API_KEY=test_... python examples/payments_usage.py
"""

import asyncio

from mollie_client import (
    ApiRequestError,
    LocalValidationError,
    NoSuchPageError,
    configure_logging,
    create_mollie_client,
)
from mollie_client.config import settings


async def example_create_payment(mollie):
    """Example: Create a payment and send the customer to the checkout."""
    print("\n=== Example 1: Create Payment ===\n")

    payment = await mollie.payments.create(
        amount={"value": "10.00", "currency": "EUR"},
        description="Order #12345",
        redirect_url="https://webshop.example.org/order/12345/",
        webhook_url="https://webshop.example.org/payments/webhook/",
        metadata={"order_id": "12345"},
    )

    print(f"Payment {payment.id} created, status {payment.status}")
    print(f"Redirect the customer to: {payment.get_checkout_url()}")
    return payment


async def example_refund_payment(mollie, payment_id):
    """Example: Partially refund a paid payment."""
    print("\n=== Example 2: Refund ===\n")

    payment = await mollie.payments.get(payment_id)
    if not payment.is_paid() or not payment.can_be_partially_refunded():
        print(f"Payment {payment.id} cannot be refunded (status {payment.status})")
        return

    refund = await mollie.payment_refunds.create(
        payment_id=payment.id,
        amount={"value": "5.00", "currency": "EUR"},
        description="Returned one item",
    )
    print(f"Refund {refund.id} is {refund.status}")


async def example_pagination(mollie):
    """Example: Walk through payments page by page."""
    print("\n=== Example 3: Pagination ===\n")

    page = await mollie.payments.list(limit=5)
    print(f"First page holds {len(page)} payments")

    try:
        older = await page.next_page()
        print(f"Next page holds {len(older)} payments")
    except NoSuchPageError:
        print("There is only one page")

    # iterate() keeps requesting the next link until there is none
    total = 0
    async for _payment in page.iterate():
        total += 1
    print(f"Walked {total} payments in total")


def example_callback(mollie, done):
    """Example: Use the callback entry point instead of awaiting."""
    print("\n=== Example 4: Callback Style ===\n")

    def on_payment(error, payment):
        if error is not None:
            print(f"Lookup failed: {error}")
        else:
            print(f"Payment {payment.id} is {payment.status}")
        done.set()

    mollie.payments.get.with_callback("tr_WDqYK6vllg", callback=on_payment)


async def example_error_handling(mollie):
    """Example: Local validation versus API errors."""
    print("\n=== Example 5: Error Handling ===\n")

    try:
        # Order id passed where a payment id is expected; nothing is sent
        mollie.payments.get("ord_pbjz8x")
    except LocalValidationError as e:
        print(f"Rejected locally: {e}")

    try:
        await mollie.payments.get("tr_doesNotExist")
    except ApiRequestError as e:
        print(f"API error: {e}")
        print(f"Documentation: {e.documentation_url}")


async def main():
    """Run all examples."""
    configure_logging(settings.logging.level, settings.logging.json_output)

    print("=" * 60)
    print("Mollie Payments Usage Examples")
    print("=" * 60)

    async with create_mollie_client(version_strings=["ExampleShop/1.0"]) as mollie:
        payment = await example_create_payment(mollie)
        await example_refund_payment(mollie, payment.id)
        await example_pagination(mollie)

        done = asyncio.Event()
        example_callback(mollie, done)
        await done.wait()

        await example_error_handling(mollie)


if __name__ == "__main__":
    asyncio.run(main())
