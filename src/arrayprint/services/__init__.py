"""Service layer — ArrayPrinter and the ServiceResult contract."""
