import os
import unittest
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database import SessionDatabase
from inserting import initial_products
from products import get_product, list_products, stock_status, update_stock
from errors import UnknownProduct


class SessionDatabaseTests(unittest.TestCase):
    def setUp(self):
        self.db = SessionDatabase(initial_products())

    def test_duplicate_ids_rejected(self):
        with self.assertRaises(ValueError):
            self.db.add_product(initial_products()[0])

    def test_transaction_rolls_back_on_error(self):
        p1 = self.db.products['P001']
        with self.assertRaises(RuntimeError):
            with self.db.transaction():
                update_stock(self.db, 'P001', -5)
                self.db.transactions.append(object())
                raise RuntimeError('fail')
        self.assertEqual(self.db.products['P001'].stock, 150)
        self.assertIs(self.db.products['P001'], p1)
        self.assertEqual(self.db.transactions, [])

    def test_transaction_keeps_changes_on_success(self):
        with self.db.transaction():
            update_stock(self.db, 'P001', 5)
        self.assertEqual(self.db.products['P001'].stock, 155)


class CatalogTests(unittest.TestCase):
    def setUp(self):
        self.db = SessionDatabase(initial_products())

    def test_get_unknown(self):
        with self.assertRaises(UnknownProduct):
            get_product(self.db, 'P404')

    def test_update_stock_clamps(self):
        self.assertEqual(update_stock(self.db, 'P005', -8), 0)
        self.assertEqual(update_stock(self.db, 'P005', 3), 3)

    def test_list_sorting(self):
        desc = [p.id for p in list_products(self.db, sort='price_desc')]
        self.assertEqual(desc[0], 'P005')
        # P001 and P006 share a price and keep seed order
        asc = [p.id for p in list_products(self.db, sort='price_asc')]
        self.assertEqual(asc, ['P004', 'P001', 'P006', 'P003', 'P002', 'P005'])
        with self.assertRaises(ValueError):
            list_products(self.db, sort='random')

    def test_stock_status(self):
        self.assertEqual(stock_status(self.db.products['P001']), 'available')
        self.assertEqual(stock_status(self.db.products['P002']), 'low_stock')
        self.db.products['P002'].stock = 0
        self.assertEqual(stock_status(self.db.products['P002']), 'out_of_stock')


if __name__ == '__main__':
    unittest.main()
