"""Product catalogue module: model, rule table, validator and save service."""
