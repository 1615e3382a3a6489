"""Master translation compiler for iOS, Android and React bundles."""
