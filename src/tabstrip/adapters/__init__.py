"""Adapters connecting the tab strip core to host UIs."""
