# Tool definitions package: shared
