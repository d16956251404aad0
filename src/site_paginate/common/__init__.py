"""Shared helpers used across site_paginate."""
