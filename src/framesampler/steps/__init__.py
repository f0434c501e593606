"""Pipeline steps. Each step lives in its own sNN_<name> package."""
