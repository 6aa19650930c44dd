def register(client, email="alice@x.com", password="pw123456", **extra):
    payload = {
        "name": "Alice",
        "email": email,
        "phone": "+24100000000",
        "password": password,
    }
    payload.update(extra)
    return client.post("/api/register", json=payload)


def withdraw(client, amount, method="orange", phone="+24111111111"):
    return client.post(
        "/api/withdraw",
        json={"amount": amount, "phoneNumber": phone, "method": method},
    )
