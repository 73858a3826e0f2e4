import logging

from storeqa.ui.actions.factory import ActionFactory
from storeqa.ui.data.models import CustomerData, MenuOptions, Product
from storeqa.utils.log_icon import icon
from storeqa.utils.steps import step


class CartFlows:
    """Multi-step cart scenarios.

    Every flow runs its steps strictly in order and stops at the first failed
    assertion; re-running a failed test is left to the retry plugin.
    """

    @staticmethod
    async def add_product_to_cart(factory: ActionFactory, product: Product):
        home_actions = factory.create_home_actions()
        product_actions = factory.create_product_actions()

        with step(f"Given user opens {product.name} from the {product.category.value} category"):
            await home_actions.select_category(product.category)
            await home_actions.select_product(product.name)
        with step(f"Then product page shows {product.name} at ${product.price}"):
            await product_actions.check_added_product(product.name)
            await product_actions.check_product_price(product.price)
        with step(f"When user adds {product.name} to the cart"):
            await product_actions.add_to_cart()
        logging.info(f"{icon['check']} {product.name} added to cart")

    @staticmethod
    async def add_and_verify_in_cart(factory: ActionFactory, product: Product):
        await CartFlows.add_product_to_cart(factory, product)

        cart_actions = factory.create_cart_actions()
        with step("When user opens the cart"):
            await factory.create_home_actions().select_menu_option(MenuOptions.CART)
        with step(f"Then {product.name} is listed in the cart"):
            await cart_actions.check_product_is_displayed(product.name)

    @staticmethod
    async def add_verify_and_delete(factory: ActionFactory, product: Product):
        await CartFlows.add_and_verify_in_cart(factory, product)

        with step(f"When user deletes {product.name}, Then it disappears from the cart"):
            await factory.create_cart_actions().delete_product_from_cart(product.name)

    @staticmethod
    async def full_purchase_flow(factory: ActionFactory, product: Product, customer: CustomerData):
        """Add, check, delete, then place an order and confirm it."""
        await CartFlows.add_verify_and_delete(factory, product)

        place_order_actions = factory.create_place_order_actions()
        with step("When user places the order"):
            await factory.create_cart_actions().select_place_order()
            await place_order_actions.verify_order_modal_visible()
        with step(f"And fills the order form for {customer.name}"):
            await place_order_actions.fill_order_form(customer)
            await place_order_actions.select_purchase()
        with step("Then the purchase is confirmed"):
            await place_order_actions.is_thank_you_message_displayed()
            await place_order_actions.confirm_order()
        logging.info(f"{icon['check']} Purchase completed for {customer.name}")
