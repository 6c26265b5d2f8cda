"""Terminal Lights Out: switch off every window of the house."""
