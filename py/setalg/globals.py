# © 2021 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Global variables

# Width in bits of accepted integers, which are signed. 0 means no limit
int_bits = 32

# Set from the SETALG_DEBUG environment variable: print a traceback
# for unexpected exceptions
debug_mode = False
