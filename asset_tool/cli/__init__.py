"""Command line interface for asset-tool"""
