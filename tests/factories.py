"""Wire-format payload builders shared by the unit tests."""

from typing import Any

API = "https://api.mollie.com/v2"


def link(path: str, type_: str = "application/hal+json") -> dict[str, str]:
    return {"href": path if path.startswith("http") else f"{API}/{path}", "type": type_}


def make_payment(id: str = "tr_WDqYK6vllg", **overrides: Any) -> dict[str, Any]:
    payment = {
        "resource": "payment",
        "id": id,
        "mode": "test",
        "createdAt": "2018-03-20T09:13:37+00:00",
        "amount": {"value": "10.00", "currency": "EUR"},
        "description": "Order #12345",
        "method": None,
        "metadata": {"order_id": "12345"},
        "status": "open",
        "isCancelable": False,
        "expiresAt": "2018-03-20T09:28:37+00:00",
        "profileId": "pfl_QkEhN94Ba",
        "sequenceType": "oneoff",
        "redirectUrl": "https://webshop.example.org/order/12345/",
        "webhookUrl": "https://webshop.example.org/payments/webhook/",
        "_links": {
            "self": link(f"payments/{id}"),
            "checkout": link("https://www.mollie.com/payscreen/select-method/7UhSN1zuXS", "text/html"),
            "documentation": link("https://docs.mollie.com/reference/v2/payments-api/get-payment", "text/html"),
        },
    }
    payment.update(overrides)
    return payment


def make_order_line(id: str = "odl_dgtxyl", order_id: str = "ord_pbjz8x") -> dict[str, Any]:
    return {
        "resource": "orderline",
        "id": id,
        "orderId": order_id,
        "name": "LEGO 42083 Bugatti Chiron",
        "sku": "5702016116977",
        "type": "physical",
        "status": "shipping",
        "isCancelable": False,
        "quantity": 1,
        "quantityShipped": 1,
        "unitPrice": {"value": "399.00", "currency": "EUR"},
        "vatRate": "21.00",
        "vatAmount": {"value": "51.89", "currency": "EUR"},
        "totalAmount": {"value": "299.00", "currency": "EUR"},
        "createdAt": "2018-08-02T09:29:56+00:00",
    }


def make_shipment(id: str = "shp_3wmsgCJN4U", order_id: str = "ord_pbjz8x", **overrides: Any) -> dict[str, Any]:
    shipment = {
        "resource": "shipment",
        "id": id,
        "orderId": order_id,
        "createdAt": "2018-08-09T14:33:54+00:00",
        "tracking": {
            "carrier": "PostNL",
            "code": "3SKABA000000000",
            "url": "http://postnl.nl/tracktrace/?B=3SKABA000000000&P=1016EE&D=NL&T=C",
        },
        "lines": [make_order_line(order_id=order_id)],
        "_links": {
            "self": link(f"orders/{order_id}/shipments/{id}"),
            "order": link(f"orders/{order_id}"),
        },
    }
    shipment.update(overrides)
    return shipment


def make_list(
    key: str,
    records: list[dict[str, Any]],
    path: str,
    next_href: str | None = None,
    previous_href: str | None = None,
) -> dict[str, Any]:
    return {
        "_embedded": {key: records},
        "count": len(records),
        "_links": {
            "self": link(path),
            "previous": link(previous_href) if previous_href else None,
            "next": link(next_href) if next_href else None,
            "documentation": link("https://docs.mollie.com/reference/v2/payments-api/list-payments", "text/html"),
        },
    }
