"""
HTTP Client for the Storefront API with retry logic
"""
import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

import httpx
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from storefront.client.cart import Cart, CartStore

logger = logging.getLogger(__name__)

MAX_RETRIES = 3


class StorefrontClientError(Exception):
    """Base exception for client errors"""
    pass


class StorefrontAPIError(StorefrontClientError):
    """The API answered with a non-success status"""
    
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class StorefrontUnavailableError(StorefrontClientError):
    """The API could not be reached"""
    pass


# Reads are idempotent and may be retried; writes never are
retry_reads = retry(
    stop=stop_after_attempt(MAX_RETRIES),
    wait=wait_exponential(multiplier=0.1, min=0.1, max=2),
    retry=retry_if_exception_type(StorefrontUnavailableError),
    reraise=True
)


class StorefrontClient:
    """Async client for the Storefront API"""
    
    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.token = token
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)
    
    async def __aenter__(self):
        return self
    
    async def __aexit__(self, *exc_info):
        await self.aclose()
    
    async def aclose(self) -> None:
        await self._client.aclose()
    
    def _headers(self) -> Dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}
    
    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, path, headers=self._headers(), **kwargs)
        except (httpx.TimeoutException, httpx.ConnectError) as e:
            logger.warning("Error calling Storefront API: %s", e)
            raise StorefrontUnavailableError(f"Storefront API unavailable: {e}")
        
        if response.is_success:
            return response.json()
        
        try:
            message = response.json().get("message", response.text)
        except ValueError:
            message = response.text
        raise StorefrontAPIError(response.status_code, message)
    
    @retry_reads
    async def _get(self, path: str, params: Optional[Dict] = None) -> Any:
        return await self._request("GET", path, params=params)
    
    # Authentication
    
    async def register(self, username: str, email: str, password: str) -> Dict:
        """Register and keep the returned token for later calls"""
        data = await self._request("POST", "/auth/register", json={
            "username": username,
            "email": email,
            "password": password,
            "confirmPassword": password
        })
        self.token = data["token"]
        return data["user"]
    
    async def login(self, email: str, password: str) -> Dict:
        """Log in and keep the returned token for later calls"""
        data = await self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = data["token"]
        return data["user"]
    
    async def me(self) -> Dict:
        data = await self._get("/auth/me")
        return data["user"]
    
    # Catalog
    
    async def list_categories(self) -> List[Dict]:
        return await self._get("/categories")
    
    async def list_products(
        self,
        category_id: Optional[str] = None,
        search: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None
    ) -> List[Dict]:
        """List active products; only the given filters are sent"""
        params = {
            "categoryId": category_id,
            "search": search,
            "minPrice": None if min_price is None else str(min_price),
            "maxPrice": None if max_price is None else str(max_price),
        }
        return await self._get("/products", params={k: v for k, v in params.items() if v is not None})
    
    async def get_product(self, product_id: str) -> Dict:
        return await self._get(f"/products/{product_id}")
    
    # Orders
    
    async def list_orders(self) -> List[Dict]:
        return await self._get("/orders")
    
    async def get_order(self, order_id: str) -> Dict:
        return await self._get(f"/orders/{order_id}")
    
    async def place_order(self, items: List[Dict], total_price: Decimal) -> Dict:
        return await self._request("POST", "/orders", json={
            "items": items,
            "totalPrice": str(total_price)
        })
    
    async def checkout(self, cart: Cart, store: Optional[CartStore] = None) -> Dict:
        """
        Place the cart as an order
        
        The cart is cleared (and saved, when a store is given) only after
        the server accepted the order.
        
        Raises:
            StorefrontAPIError: If the server rejects the order
        """
        payload = cart.to_order_payload()
        order = await self._request("POST", "/orders", json=payload)
        cart.clear()
        if store is not None:
            store.save(cart)
        return order
