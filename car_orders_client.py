#!/usr/bin/env python3
"""Car Ordering API client.

This module defines a small client wrapper around the Car Ordering
REST API, plus a command line front end for it.  The client uses the
``requests`` library internally to make HTTP calls.

The client exposes high-level methods for every operation of the API:

* :meth:`list_orders` – return all orders.
* :meth:`get_order` – fetch a single order by its identifier.
* :meth:`create_order` – place a new order for a make, model and color.
* :meth:`update_order` – change the car or the status of an order.
* :meth:`delete_order` – remove an order.
* :meth:`list_makes`, :meth:`list_models`, :meth:`list_colors` – read
  the inventory catalog.

None of the methods raise on HTTP or network errors.  Each returns a
tuple ``(result, error)`` where ``error`` is ``None`` on success or a
dictionary with ``status_code`` and ``message`` keys.

Usage:
    python car_orders_client.py --base-url http://localhost:8000 create Toyota Camry Black
    python car_orders_client.py update <id> --status Shipped
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

ORDERS_PATH = "/api/cars"

Error = Dict[str, Any]


class CarOrdersAPI:
    """Client for interacting with the Car Ordering API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/cars``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    detail = err_json.get("detail") if isinstance(err_json, dict) else None
                    message = detail if isinstance(detail, str) else json.dumps(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _order_path(order_id: str) -> str:
        return f"{ORDERS_PATH}/{quote(str(order_id), safe='')}"

    # ------------------------------------------------------------------
    # Order operations
    # ------------------------------------------------------------------
    def list_orders(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", ORDERS_PATH)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_order(self, order_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._order_path(order_id))

    def create_order(self, make: str, model: str, color: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Place a new order.

        Returns:
            A tuple ``(order, error)``.  A car missing from the
            inventory yields an error with ``status_code`` 400.
        """
        payload = {"make": make, "model": model, "color": color}
        return self._request("POST", ORDERS_PATH, json_body=payload)

    def update_order(
        self,
        order_id: str,
        *,
        make: Optional[str] = None,
        model: Optional[str] = None,
        color: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update an order.  Only the arguments that are not ``None`` are sent."""
        fields = {"make": make, "model": model, "color": color, "status": status}
        payload = {key: value for key, value in fields.items() if value is not None}
        return self._request("PUT", self._order_path(order_id), json_body=payload)

    def delete_order(self, order_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", self._order_path(order_id))
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Catalog operations
    # ------------------------------------------------------------------
    def list_makes(self) -> Tuple[List[str], Optional[Error]]:
        data, error = self._request("GET", f"{ORDERS_PATH}/makes")
        return (data or [], error)

    def list_models(self, make: str) -> Tuple[List[str], Optional[Error]]:
        data, error = self._request("GET", f"{ORDERS_PATH}/models/{quote(make, safe='')}")
        return (data or [], error)

    def list_colors(self) -> Tuple[List[str], Optional[Error]]:
        data, error = self._request("GET", f"{ORDERS_PATH}/colors")
        return (data or [], error)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Command line client for the Car Ordering API.")
    ap.add_argument("--base-url", default="http://localhost:8000", help="API base URL (default: %(default)s)")
    ap.add_argument("--verbose", "-v", action="store_true", help="Log HTTP requests")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all orders")
    get_p = sub.add_parser("get", help="Show one order")
    get_p.add_argument("order_id")

    create_p = sub.add_parser("create", help="Place a new order")
    create_p.add_argument("make")
    create_p.add_argument("model")
    create_p.add_argument("color")

    update_p = sub.add_parser("update", help="Update an order")
    update_p.add_argument("order_id")
    update_p.add_argument("--make")
    update_p.add_argument("--model")
    update_p.add_argument("--color")
    update_p.add_argument("--status")

    delete_p = sub.add_parser("delete", help="Delete an order")
    delete_p.add_argument("order_id")

    sub.add_parser("makes", help="List available makes")
    models_p = sub.add_parser("models", help="List models for a make")
    models_p.add_argument("make")
    sub.add_parser("colors", help="List available colors")
    return ap


def run_command(api: CarOrdersAPI, args: argparse.Namespace) -> Tuple[Any, Optional[Error]]:
    """Dispatch parsed command line arguments to the client."""
    if args.command == "list":
        return api.list_orders()
    if args.command == "get":
        return api.get_order(args.order_id)
    if args.command == "create":
        return api.create_order(args.make, args.model, args.color)
    if args.command == "update":
        return api.update_order(
            args.order_id, make=args.make, model=args.model, color=args.color, status=args.status
        )
    if args.command == "delete":
        return api.delete_order(args.order_id)
    if args.command == "makes":
        return api.list_makes()
    if args.command == "models":
        return api.list_models(args.make)
    if args.command == "colors":
        return api.list_colors()
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    api = CarOrdersAPI(base_url=args.base_url)
    result, error = run_command(api, args)
    if error:
        print(f"[!] {error['message']} (status {error['status_code']})", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
