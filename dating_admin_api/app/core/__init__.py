"""Configuration, logging, security and the repository store."""
