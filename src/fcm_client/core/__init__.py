"""Core building blocks shared across fcm-client."""
