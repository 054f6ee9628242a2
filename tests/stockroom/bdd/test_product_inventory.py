"""BDD tests for the product inventory API."""

from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/product_inventory.feature")


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a stocked product named "{name}"'), target_fixture="stocked")
def stocked_product(client, name):
    payload = {"name": name, "description": "...", "price": 14.99, "quantity": 14}
    return client.post("/products", json=payload).json()["data"][0]


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(
    parsers.re(r'a product named "(?P<name>.*)" priced (?P<price>[\d.]+) with quantity (?P<quantity>\d+) is stocked'),
    target_fixture="response",
)
def stock_product(client, name, price, quantity):
    payload = {"name": name, "description": "...", "price": float(price), "quantity": int(quantity)}
    return client.post("/products", json=payload)


@when(parsers.cfparse('the stocked product is corrected to be named "{name}"'), target_fixture="response")
def correct_product(client, stocked, name):
    return client.put("/products", json={**stocked, "name": name})


@when(parsers.cfparse('the product "{product_id}" is unstocked'), target_fixture="response")
def unstock_product(client, product_id):
    return client.delete(f"/products/{product_id}")


@when("all products are listed", target_fixture="response")
def list_products(client):
    return client.get("/products")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the response status is {status:d}"))
def response_status_is(response, status):
    assert response.status_code == status


@then(parsers.cfparse('the first product in the response is named "{name}"'))
def first_product_named(response, name):
    assert response.json()["data"][0]["name"] == name


@then("the first product in the response has an id")
def first_product_has_id(response):
    assert response.json()["data"][0]["id"]


@then("the response carries no data")
def response_has_no_data(response):
    assert response.json()["data"] is None


@then(parsers.cfparse("the response carries {count:d} products"))
def response_has_n_products(response, count):
    assert len(response.json()["data"]) == count


@then(parsers.cfparse('retrieving the stocked product shows the name "{name}"'))
def retrieved_name_is(client, stocked, name):
    response = client.get(f"/products/{stocked['id']}")
    assert response.json()["data"][0]["name"] == name
