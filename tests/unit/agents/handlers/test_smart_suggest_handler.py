import pytest

from portal_assistant.agents.handlers import SmartSuggestHandler
from portal_assistant.core.exceptions import CollaboratorUnavailableException
from tests.utils import CartBuilder, InMemoryCartService

CHAI_SUGGESTIONS = (
    "💡 Customers who buy Chai might also like:\n"
    "• Chang (ID: 2) - $19.00 - 17 in stock\n"
    "• Chartreuse verte (ID: 39) - $18.00 - 69 in stock"
)


@pytest.fixture
def handler(catalog_service, search_products, cart_service):
    return SmartSuggestHandler(catalog_service, search_products, cart_service)


class TestSmartSuggestHandler:
    @pytest.mark.asyncio
    async def test_suggests_same_category_by_name(self, handler, make_context):
        outcome = await handler.handle(make_context("suggest something for chai"))

        assert outcome.reply_fragment == CHAI_SUGGESTIONS
        assert outcome.side_effect is None

    @pytest.mark.asyncio
    async def test_target_by_id(self, handler, make_context):
        outcome = await handler.handle(make_context("recommend products for product 1"))

        assert outcome.reply_fragment == CHAI_SUGGESTIONS

    @pytest.mark.asyncio
    async def test_no_complementary_products(self, handler, make_context):
        outcome = await handler.handle(make_context("what complements to tofu?"))

        assert outcome.reply_fragment == "💡 I found no complementary products for Tofu."

    @pytest.mark.asyncio
    async def test_display_limit(self, catalog_service, search_products, make_context):
        handler = SmartSuggestHandler(catalog_service, search_products, display_limit=1)

        outcome = await handler.handle(make_context("suggest something for chai"))

        assert outcome.reply_fragment.split("\n")[1:] == ["• Chang (ID: 2) - $19.00 - 17 in stock"]

    @pytest.mark.asyncio
    async def test_falls_back_to_first_cart_product(self, catalog_service, search_products, make_context):
        cart_service = InMemoryCartService(catalog_service, {"ALFKI": CartBuilder().with_line(1, 1, "Chai").build()})
        handler = SmartSuggestHandler(catalog_service, search_products, cart_service)

        outcome = await handler.handle(make_context("what do you recommend?"))

        assert outcome.reply_fragment == CHAI_SUGGESTIONS

    @pytest.mark.asyncio
    async def test_no_target(self, handler, make_context):
        outcome = await handler.handle(make_context("what do you recommend?"))

        assert outcome.reply_fragment == (
            '💡 I could not identify a product to base suggestions on. Try "suggest products for chai".'
        )

    @pytest.mark.asyncio
    async def test_requires_catalog(self, search_products, make_context):
        with pytest.raises(CollaboratorUnavailableException):
            await SmartSuggestHandler(None, search_products).handle(make_context("suggest something for chai"))
