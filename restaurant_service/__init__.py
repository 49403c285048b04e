"""Restaurant ordering service: menu, cart and orders."""
