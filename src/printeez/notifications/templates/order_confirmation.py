"""Order confirmation template: sent once an order has been placed."""

from html import escape


class OrderConfirmationTemplate:
    subject = "Order Confirmation - Printeez"

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        name = context.get("customer_name") or "Customer"
        total = context.get("total", 0)
        payment_method = context.get("payment_method", "COD")
        address = context.get("address", "")
        placed_on = context.get("placed_on", "")
        items = context.get("items", [])

        item_lines = "\n".join(
            f"  - {item['product_name']} ({item['size']}) x {item['quantity']} @ PKR {item['unit_price']:.2f}"
            for item in items
        )
        body = (
            f"Dear {name},\n\n"
            "Thank you for your order! It has been received and is being processed.\n\n"
            f"Order ID: {order_id}\n"
            f"Total Amount: PKR {total:.2f}\n"
            f"Payment Method: {payment_method}\n"
            f"Delivery Address: {address}\n"
            f"Order Date: {placed_on}\n\n"
            f"Items Ordered:\n{item_lines}\n\n"
            "Your order will be delivered via Cash on Delivery (COD). "
            "Please have the exact amount ready upon delivery.\n\n"
            "Thank you for choosing Printeez!\n"
            "The Printeez Team"
        )

        item_rows = "".join(
            f"<tr><td>{escape(item['product_name'])}</td><td>{escape(item['size'])}</td>"
            f"<td>{item['quantity']}</td><td>PKR {item['unit_price']:.2f}</td></tr>"
            for item in items
        )
        html_body = (
            "<h2>Order Confirmation</h2>"
            f"<p>Dear {escape(name)},</p>"
            "<p>Thank you for your order! It has been received and is being processed.</p>"
            f"<p><strong>Order ID:</strong> {escape(str(order_id))}<br>"
            f"<strong>Total Amount:</strong> PKR {total:.2f}<br>"
            f"<strong>Payment Method:</strong> {escape(payment_method)}<br>"
            f"<strong>Delivery Address:</strong> {escape(address)}<br>"
            f"<strong>Order Date:</strong> {escape(placed_on)}</p>"
            f"<table><tr><th>Product</th><th>Size</th><th>Qty</th><th>Price</th></tr>{item_rows}</table>"
            "<p>Thank you for choosing Printeez!</p>"
        )

        return {
            "subject": OrderConfirmationTemplate.subject,
            "body": body,
            "html_body": html_body,
        }
