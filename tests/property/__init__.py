"""Property-тесты (hypothesis) для алгебраических законов Maybe и GregorianDate."""
