# Core application infrastructure - settings, logging, exceptions
