# -*- coding: utf-8 -*-
"""Multi-step wizards."""
