"""
Package import tests.
"""


def test_package_imports():
    """Test the top-level package exposes its public API."""
    import algorand_client

    assert algorand_client.__version__ == "0.1.0"
    for name in algorand_client.__all__:
        assert hasattr(algorand_client, name), name


def test_subpackages_import():
    """Test every subpackage imports on its own."""
    from algorand_client import accounts, codec, crypto, runtime, tx
    from algorand_client.tx import builders

    assert accounts.Account
    assert codec.encode_canonical
    assert crypto.sha512_256
    assert runtime.AlgorandError
    assert tx.sign_transaction
    assert builders.make_input


def test_end_to_end(account):
    """Test building, signing and decoding a payment through the top-level API."""
    import algorand_client as algo

    txn = algo.PaymentTransactionInput(
        sender=account.address.encode(),
        to=algo.Account.generate().address.encode(),
        fee=1000,
        amount=1,
        first_round=1,
        last_round=1001,
        genesis_hash=algo.base64_encode(bytes(32)),
        is_flat_fee=True,
    ).build()
    signed = algo.sign_transaction(txn, account)

    decoded = algo.SignedTransaction.decode(algo.encode_signed_transaction(signed))
    assert decoded == signed
    assert decoded.verify()
