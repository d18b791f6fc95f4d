"""Client side of the wizard: API client, background sync, controller."""
