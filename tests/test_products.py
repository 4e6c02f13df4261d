"""상품 CRUD API 테스트.

Product CRUD API tests — Create, Read, Update, Delete product endpoints.
Tests request validation, status codes, and edge cases.
"""

import uuid

from httpx import AsyncClient

from catalog.utils.pagination import MAX_LIMIT, MAX_PAGE
from tests.conftest import URL, product_payload


class TestProductCreate:
    """상품 생성 테스트."""

    async def test_create_product(self, client: AsyncClient):
        """상품 생성 성공."""
        res = await client.post(URL, json=product_payload())
        assert res.status_code == 201
        data = res.json()
        assert data["title"] == "Red Hoodie"
        assert data["slug"] == "red-hoodie"
        assert data["price"] == 0
        assert data["images"] == []
        uuid.UUID(data["id"])

    async def test_create_with_images(self, client: AsyncClient):
        res = await client.post(URL, json=product_payload(
            price=49.5, description="Warm", tags=["winter"], images=["a.jpg", "b.jpg"],
        ))
        assert res.status_code == 201
        data = res.json()
        assert data["price"] == 49.5
        assert data["tags"] == ["winter"]
        assert [img["url"] for img in data["images"]] == ["a.jpg", "b.jpg"]

    async def test_create_duplicate_title(self, client: AsyncClient):
        """같은 제목으로 생성 시 409."""
        assert (await client.post(URL, json=product_payload())).status_code == 201
        res = await client.post(URL, json=product_payload(slug="another"))
        assert res.status_code == 409
        assert "Red Hoodie" in res.json()["detail"]

    async def test_create_validation(self, client: AsyncClient):
        """필드 제약 위반 시 422."""
        assert (await client.post(URL, json=product_payload(title=""))).status_code == 422
        assert (await client.post(URL, json=product_payload(price=0))).status_code == 422
        assert (await client.post(URL, json=product_payload(sizes=[]))).status_code == 422
        assert (await client.post(URL, json=product_payload(sizes=[str(i) for i in range(11)]))).status_code == 422
        assert (await client.post(URL, json=product_payload(gender=""))).status_code == 422

    async def test_create_unsluggable_title(self, client: AsyncClient):
        """슬러그를 만들 수 없는 제목이면 400."""
        res = await client.post(URL, json=product_payload(title="???"))
        assert res.status_code == 400


class TestProductRead:
    """상품 조회 테스트."""

    async def test_list_products(self, client: AsyncClient):
        """기본 페이지네이션 (page=1, limit=10)."""
        for i in range(12):
            await client.post(URL, json=product_payload(f"Product {i}"))

        res = await client.get(URL)
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 12
        assert data["page"] == 1
        assert data["limit"] == 10
        assert data["pages"] == 2
        assert len(data["items"]) == 10

    async def test_list_second_page(self, client: AsyncClient):
        for i in range(12):
            await client.post(URL, json=product_payload(f"Product {i}"))

        res = await client.get(URL, params={"page": 2, "limit": 10})
        assert res.status_code == 200
        assert len(res.json()["items"]) == 2

    async def test_list_items_flatten_images(self, client: AsyncClient, product):
        res = await client.get(URL)
        item = res.json()["items"][0]
        assert item["images"] == ["front.png", "back.png"]
        assert set(item) == {"id", "title", "slug", "description", "price", "images"}

    async def test_list_rejects_bad_paging(self, client: AsyncClient):
        assert (await client.get(URL, params={"page": 0})).status_code == 422
        assert (await client.get(URL, params={"limit": 0})).status_code == 422

    async def test_list_huge_page_number(self, client: AsyncClient, product):
        """OFFSET이 int64를 넘는 페이지는 422, 상한 페이지는 빈 목록."""
        res = await client.get(URL, params={"page": "10000000000000000000"})
        assert res.status_code == 422

        res = await client.get(URL, params={"page": MAX_PAGE + 1})
        assert res.status_code == 422

        res = await client.get(URL, params={"page": MAX_PAGE, "limit": MAX_LIMIT})
        assert res.status_code == 200
        assert res.json()["items"] == []
        assert res.json()["total"] == 1

    async def test_get_by_id_and_slug(self, client: AsyncClient, product):
        by_id = await client.get(f"{URL}/{product.id}")
        by_slug = await client.get(f"{URL}/test-shirt")
        assert by_id.status_code == 200
        assert by_slug.status_code == 200
        assert by_id.json() == by_slug.json()

    async def test_get_nonexistent(self, client: AsyncClient):
        """존재하지 않는 상품 조회 시 404."""
        assert (await client.get(f"{URL}/{uuid.uuid4()}")).status_code == 404
        assert (await client.get(f"{URL}/missing-slug")).status_code == 404


class TestProductUpdate:
    """상품 수정 테스트."""

    async def test_update_title(self, client: AsyncClient, product):
        res = await client.put(f"{URL}/{product.id}", json={"title": "Green Shirt"})
        assert res.status_code == 200
        data = res.json()
        assert data["title"] == "Green Shirt"
        assert data["slug"] == "green-shirt"
        assert len(data["images"]) == 2

    async def test_update_images(self, client: AsyncClient, product):
        """images 전달 시 전체 교체."""
        res = await client.put(f"{URL}/{product.id}", json={"images": ["only.png"]})
        assert res.status_code == 200
        assert [img["url"] for img in res.json()["images"]] == ["only.png"]

        again = await client.get(f"{URL}/{product.id}")
        assert [img["url"] for img in again.json()["images"]] == ["only.png"]

    async def test_update_slug_collision_is_500(self, client: AsyncClient, product):
        """수정 시 슬러그 충돌은 500."""
        other = (await client.post(URL, json=product_payload("Other"))).json()
        res = await client.put(f"{URL}/{other['id']}", json={"slug": "test-shirt"})
        assert res.status_code == 500

    async def test_update_null_on_required_field(self, client: AsyncClient, product):
        """필수 필드에 null 전달 시 422, 상품은 그대로."""
        for field in ("title", "price", "in_stock", "sizes", "gender", "tags", "images"):
            res = await client.put(f"{URL}/{product.id}", json={field: None})
            assert res.status_code == 422, field

        data = (await client.get(f"{URL}/{product.id}")).json()
        assert data["title"] == "Test Shirt"
        assert data["tags"] == ["shirt"]
        assert len(data["images"]) == 2

    async def test_update_null_description_clears_it(self, client: AsyncClient, product):
        res = await client.put(f"{URL}/{product.id}", json={"description": "Soft cotton"})
        assert res.json()["description"] == "Soft cotton"

        res = await client.put(f"{URL}/{product.id}", json={"description": None})
        assert res.status_code == 200
        assert res.json()["description"] is None

    async def test_update_null_slug_rederives_from_title(self, client: AsyncClient, product):
        await client.put(f"{URL}/{product.id}", json={"slug": "custom"})

        res = await client.put(f"{URL}/{product.id}", json={"slug": None})
        assert res.status_code == 200
        assert res.json()["slug"] == "test-shirt"

    async def test_update_nonexistent(self, client: AsyncClient):
        res = await client.put(f"{URL}/{uuid.uuid4()}", json={"in_stock": 1})
        assert res.status_code == 404

    async def test_update_malformed_id(self, client: AsyncClient):
        res = await client.put(f"{URL}/not-a-uuid", json={"in_stock": 1})
        assert res.status_code == 422


class TestProductDelete:
    """상품 삭제 테스트."""

    async def test_delete_product(self, client: AsyncClient, product):
        """상품 삭제 성공 후 조회 시 404."""
        product_id = product.id
        res = await client.delete(f"{URL}/{product_id}")
        assert res.status_code == 200
        assert res.json()["message"] == f"Product with id {product_id} has been successfully removed"

        res2 = await client.get(f"{URL}/{product_id}")
        assert res2.status_code == 404

    async def test_delete_nonexistent(self, client: AsyncClient):
        res = await client.delete(f"{URL}/{uuid.uuid4()}")
        assert res.status_code == 404


async def test_health(client: AsyncClient):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
