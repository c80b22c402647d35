"""
Factory for creating the raw series connector based on configuration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from connectors.reanalyzer import ReanalyzerConnector
from connectors.snapshot_file import SnapshotFileConnector


class DataSourceFactory:

    @staticmethod
    def create_series(config):
        from config import SOURCE_BACKEND_FILE, SOURCE_BACKEND_HTTP

        if config.source_backend == SOURCE_BACKEND_HTTP:
            return ReanalyzerConnector(config.source_url, timeout=config.source_timeout)
        if config.source_backend == SOURCE_BACKEND_FILE:
            if not config.source_file:
                raise ValueError("file source backend needs DAILYNORM_SOURCE_FILE")
            return SnapshotFileConnector(config.source_file)
        raise ValueError("Unsupported source backend")
