"""Products API load test scenarios.

Stateful SequentialTaskSet journeys over the five product endpoints. Steps
execute in order — each depends on the previous step succeeding.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import correction_data, invalid_product_data, product_data
from loadtests.helpers.state import ProductState


class ProductLifecycleJourney(SequentialTaskSet):
    """Stock -> Get -> Correct -> Get -> Unstock -> Get (404)."""

    def on_start(self):
        self.state = ProductState()

    @task
    def stock(self):
        with self.client.post(
            "/products",
            json=product_data(),
            catch_response=True,
            name="POST /products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product = resp.json()["data"][0]
            else:
                resp.failure(f"Stock product failed: {resp.status_code}")
                self.interrupt()

    @task
    def get(self):
        with self.client.get(
            f"/products/{self.state.product_id}",
            catch_response=True,
            name="GET /products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Get product failed: {resp.status_code}")
                self.interrupt()

    @task
    def correct(self):
        with self.client.put(
            "/products",
            json=correction_data(self.state.product),
            catch_response=True,
            name="PUT /products",
        ) as resp:
            if resp.status_code == 200:
                self.state.product = resp.json()["data"][0]
                self.state.corrections += 1
            else:
                resp.failure(f"Correct product failed: {resp.status_code}")

    @task
    def unstock(self):
        with self.client.delete(
            f"/products/{self.state.product_id}",
            catch_response=True,
            name="DELETE /products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Unstock product failed: {resp.status_code}")
                self.interrupt()

    @task
    def get_after_unstock(self):
        with self.client.get(
            f"/products/{self.state.product_id}",
            catch_response=True,
            name="GET /products/{id} (unstocked)",
        ) as resp:
            if resp.status_code == 404:
                resp.success()
            else:
                resp.failure(f"Unstocked product still visible: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class InventoryBrowsingJourney(SequentialTaskSet):
    """List all -> stock an invalid product (400) -> list all."""

    @task
    def list_all(self):
        with self.client.get("/products", catch_response=True, name="GET /products") as resp:
            if resp.status_code != 200:
                resp.failure(f"List products failed: {resp.status_code}")

    @task
    def stock_invalid(self):
        with self.client.post(
            "/products",
            json=invalid_product_data(),
            catch_response=True,
            name="POST /products (invalid)",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Invalid product was not rejected: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class ProductsUser(HttpUser):
    """Locust user simulating inventory clerks.

    Weighted distribution:
    - 75% Product Lifecycle
    - 25% Inventory Browsing
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        ProductLifecycleJourney: 3,
        InventoryBrowsingJourney: 1,
    }
