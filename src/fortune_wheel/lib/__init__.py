# Shared infrastructure: YAML config loading and the spin event log
