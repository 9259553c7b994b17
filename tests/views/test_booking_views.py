from datetime import date, timedelta

from tests.util import booking_payload


class TestBookingsView:

    def test_create_booking_rents_car(self, client, auth_headers, api_car):
        resp = client.post("/api/bookings", json=booking_payload(api_car["id"]), headers=auth_headers)
        assert resp.status_code == 201
        booking = resp.json()
        assert booking["status"] == "active"
        assert booking["car"] == api_car["id"]

        car = client.get(f"/api/cars/{api_car['id']}", headers=auth_headers).json()
        assert car["status"] == "rented"

    def test_create_booking_unknown_car(self, client, auth_headers):
        resp = client.post("/api/bookings", json=booking_payload(999), headers=auth_headers)
        assert resp.status_code == 400
        assert resp.json() == {"message": "Car not found"}

    def test_create_booking_car_id_out_of_range(self, client, auth_headers):
        resp = client.post("/api/bookings", json=booking_payload(99999999999999999999), headers=auth_headers)
        assert resp.status_code == 400
        assert "message" in resp.json()

    def test_create_booking_blank_customer(self, client, auth_headers, api_car):
        resp = client.post("/api/bookings", json=booking_payload(api_car["id"], customerName="  "), headers=auth_headers)
        assert resp.status_code == 400

    def test_create_booking_missing_fields(self, client, auth_headers, api_car):
        resp = client.post("/api/bookings", json={"car": api_car["id"]}, headers=auth_headers)
        assert resp.status_code == 400

    def test_create_booking_inverted_dates(self, client, auth_headers, api_car):
        today = date.today()
        payload = booking_payload(
            api_car["id"], rentFrom=today.isoformat(), rentTo=(today - timedelta(days=1)).isoformat()
        )
        resp = client.post("/api/bookings", json=payload, headers=auth_headers)
        assert resp.status_code == 400
        assert client.get(f"/api/cars/{api_car['id']}", headers=auth_headers).json()["status"] == "available"

    def test_list_bookings_inlines_car(self, client, auth_headers, api_car):
        client.post("/api/bookings", json=booking_payload(api_car["id"]), headers=auth_headers)

        resp = client.get("/api/bookings", headers=auth_headers)
        assert resp.status_code == 200
        bookings = resp.json()
        assert len(bookings) == 1
        assert bookings[0]["car"]["id"] == api_car["id"]
        assert bookings[0]["car"]["registrationNo"] == api_car["registrationNo"]
        assert bookings[0]["car"]["status"] == "rented"


class TestBookingView:

    def test_get_booking(self, client, auth_headers, api_car):
        created = client.post("/api/bookings", json=booking_payload(api_car["id"]), headers=auth_headers).json()
        resp = client.get(f"/api/bookings/{created['id']}", headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["customerName"] == created["customerName"]
        assert resp.json()["car"]["id"] == api_car["id"]

    def test_get_missing_booking(self, client, auth_headers):
        resp = client.get("/api/bookings/999", headers=auth_headers)
        assert resp.status_code == 404
        assert resp.json() == {"message": "Booking not found"}

    def test_update_booking_status_frees_car(self, client, auth_headers, api_car):
        created = client.post("/api/bookings", json=booking_payload(api_car["id"]), headers=auth_headers).json()

        resp = client.put(f"/api/bookings/{created['id']}", json={"status": "completed"}, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["status"] == "completed"
        assert client.get(f"/api/cars/{api_car['id']}", headers=auth_headers).json()["status"] == "available"

    def test_update_booking_customer(self, client, auth_headers, api_car):
        created = client.post("/api/bookings", json=booking_payload(api_car["id"]), headers=auth_headers).json()
        resp = client.put(f"/api/bookings/{created['id']}", json={"customerName": "Carol"}, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["customerName"] == "Carol"
        assert resp.json()["status"] == "active"

    def test_update_missing_booking(self, client, auth_headers):
        resp = client.put("/api/bookings/999", json={"status": "completed"}, headers=auth_headers)
        assert resp.status_code == 404

    def test_update_booking_bad_status(self, client, auth_headers, api_car):
        created = client.post("/api/bookings", json=booking_payload(api_car["id"]), headers=auth_headers).json()
        resp = client.put(f"/api/bookings/{created['id']}", json={"status": "lost"}, headers=auth_headers)
        assert resp.status_code == 400

    def test_delete_booking_frees_car(self, client, auth_headers, api_car):
        created = client.post("/api/bookings", json=booking_payload(api_car["id"]), headers=auth_headers).json()

        resp = client.delete(f"/api/bookings/{created['id']}", headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Booking deleted successfully"}
        assert client.get(f"/api/cars/{api_car['id']}", headers=auth_headers).json()["status"] == "available"

    def test_booking_id_out_of_range(self, client, auth_headers):
        assert client.delete("/api/bookings/99999999999999999999", headers=auth_headers).status_code == 400

    def test_delete_missing_booking(self, client, auth_headers):
        assert client.delete("/api/bookings/999", headers=auth_headers).status_code == 404
