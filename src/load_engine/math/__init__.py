"""Pure numerical building blocks: stress, daily aggregation, PMC, thresholds, zones."""
