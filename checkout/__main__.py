from checkout.cli import app

app(prog_name="checkout-demo")
