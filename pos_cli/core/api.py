# pos_cli/core/api.py
from typing import Any, List, Optional

import requests

from . import config


class ApiError(Exception):
    """Raised when the backend answers with an error or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _headers(token: Optional[str]) -> dict:
    if token is None:
        return {}
    return {"Authorization": f"Bearer {token}"}


def _request(method: str, path: str, token: Optional[str] = None, **kwargs) -> Any:
    url = f"{config.BASE_URL}{path}"
    try:
        resp = requests.request(method, url, headers=_headers(token), timeout=config.TIMEOUT, **kwargs)
    except requests.RequestException as e:
        raise ApiError(f"Cannot reach backend at {config.BASE_URL}: {e}")

    if resp.status_code != 200:
        try:
            message = resp.json().get("error", resp.text)
        except ValueError:
            message = resp.text
        raise ApiError(message, resp.status_code)
    return resp.json()


def api_register(username: str, password: str) -> dict:
    return _request("POST", "/users", json={"username": username, "password": password})

def api_login(username: str, password: str) -> dict:
    """
    Logs in and returns {"access_token": ..., "user": {...}}.
    """
    return _request("POST", "/users/login", json={"username": username, "password": password})

def api_get_user(token: str, username: str) -> dict:
    return _request("GET", f"/users/{username}", token)


def api_list_products(token: str, username: str, name: Optional[str] = None) -> List[dict]:
    params = {"name": name} if name else None
    return _request("GET", f"/users/{username}/products", token, params=params)

def api_create_product(token: str, username: str, product: dict) -> dict:
    return _request("POST", f"/users/{username}/products", token, json=product)

def api_update_product(token: str, username: str, product_id: str, product: dict) -> dict:
    return _request("PATCH", f"/users/{username}/products/{product_id}", token, json=product)

def api_delete_product(token: str, username: str, product_id: str, user_id: str) -> dict:
    return _request("DELETE", f"/users/{username}/products/{product_id}", token, json={"user_id": user_id})


def api_get_menu(shop_name: str) -> List[dict]:
    return _request("GET", f"/{shop_name}/menus")

def api_add_menu_item(token: str, username: str, item: dict) -> dict:
    return _request("POST", f"/users/{username}/menus", token, json=item)

def api_update_menu_item(token: str, username: str, menu_item_id: str, item: dict) -> dict:
    return _request("PATCH", f"/users/{username}/menus/{menu_item_id}", token, json=item)

def api_delete_menu_item(token: str, username: str, menu_item_id: str, user_id: str) -> dict:
    body = {"user_id": user_id, "shop_name": username}
    return _request("DELETE", f"/users/{username}/menus/{menu_item_id}", token, json=body)


def api_create_order(shop_name: str, order: dict) -> List[dict]:
    return _request("POST", f"/{shop_name}/order", json=order)

def api_get_order(shop_name: str, order_id: str) -> List[dict]:
    return _request("GET", f"/{shop_name}/order/{order_id}")

def api_list_orders(token: str, username: str, order_day: Optional[str] = None) -> List[dict]:
    params = {"order_day": order_day} if order_day else None
    return _request("GET", f"/users/{username}/orders", token, params=params)

def api_update_order_item(token: str, username: str, order_item_id: str, amount: int, status: str) -> dict:
    body = {"shop_name": username, "amount": amount, "status": status}
    return _request("PATCH", f"/users/{username}/orders/{order_item_id}", token, json=body)

def api_delete_order_item(token: str, username: str, order_item_id: str) -> dict:
    return _request("DELETE", f"/users/{username}/orders/{order_item_id}", token, json={"shop_name": username})
