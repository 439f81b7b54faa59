# -*- coding: utf-8 -*-
"""PulseFit — fitness & nutrition personalization backend."""
