# kolor default configuration file
# Copied to ~/.kolorrc.py the first time kolor runs without a config.
#
# This file is plain Python. The following names are predefined:
#   theme(name, *tokens)   register a theme, e.g. theme('tip', 'blue', 'bold')
#   remove_theme(name)     remove a custom theme
#   enable() / disable()   toggle colored output
#   logger                 kolor's logger
#   kolor                  the kolor package

# Suppress warnings (e.g., duplicate theme definitions)
# logger.suppress()

# Built-in themes (already defined):
# theme('success', 'green', 'bold')
# theme('error', 'white', 'on_red', 'bold')
# theme('warning', 'yellow', 'bold')
# theme('info', 'cyan')
# theme('debug', 'magenta')

# Custom themes
# theme('highlight', 'black', 'on_yellow')
# theme('alert', 'yellow', 'on_red', 'bold', 'underline')
# theme('tip', 'blue', 'bold')
# theme('note', 'cyan', 'underline')

# Conditional configuration
# import os
# if os.environ.get('CI'):
#     disable()
