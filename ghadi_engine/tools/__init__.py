# Ghadi Engine - Tools
