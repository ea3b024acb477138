CONTRACT_VERSION = "1.0.0"

COMMAND_INTENTS = (
    "travel_intent",
    "buy_item_intent",
    "buy_potion_intent",
    "browse_intent",
    "use_item_intent",
    "hunt_intent",
    "face_dragon_intent",
    "quit_intent",
)

QUERY_INTENTS = (
    "get_menu_view",
    "get_status_view",
    "get_shop_view",
    "get_inventory_view",
    "get_session_summary",
    "status_intent",
    "help_intent",
)

CONTRACT_DTO_TYPES = (
    "ActionResult",
    "LocationMenuView",
    "StatusView",
    "ShopView",
    "SessionSummaryView",
)
