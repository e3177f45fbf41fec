"""Business services: persistence per record kind, completion client, chat orchestration."""
