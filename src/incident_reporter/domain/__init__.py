"""Domain layer: records, document model, ports and category rules."""
